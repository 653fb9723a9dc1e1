"""Public parameters of the Edwards curve: its groups and its pairing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from . import edwards_ate
from .edwards_ate import AteG1Precomp, Fq3ConicCoefficients
from .edwards_g1 import EdwardsG1
from .edwards_g2 import EdwardsG2
from .edwards_params import EdwardsFq, EdwardsFq3, EdwardsFq6, EdwardsFr
from .edwards_tate import final_exponentiation as _final_exponentiation


class EdwardsPP:
    """The types and pairing operations that make up the Edwards curve."""

    scalar_field: ClassVar[type] = EdwardsFr
    g1_type: ClassVar[type] = EdwardsG1
    g2_type: ClassVar[type] = EdwardsG2
    g1_precomp_type: ClassVar[type] = AteG1Precomp
    g2_precomp_type: ClassVar[type] = list
    fq_type: ClassVar[type] = EdwardsFq
    fqe_type: ClassVar[type] = EdwardsFq3
    fqk_type: ClassVar[type] = EdwardsFq6
    gt_type: ClassVar[type] = EdwardsFq6

    has_affine_pairing: ClassVar[bool] = False

    @staticmethod
    def final_exponentiation(elt: EdwardsFq6) -> EdwardsFq6:
        return _final_exponentiation(elt)

    @staticmethod
    def precompute_g1(P: EdwardsG1) -> AteG1Precomp:
        return edwards_ate.precompute_g1(P)

    @staticmethod
    def precompute_g2(Q: EdwardsG2) -> list[Fq3ConicCoefficients]:
        return edwards_ate.precompute_g2(Q)

    @staticmethod
    def miller_loop(
        prec_P: AteG1Precomp, prec_Q: Sequence[Fq3ConicCoefficients]
    ) -> EdwardsFq6:
        return edwards_ate.miller_loop(prec_P, prec_Q)

    @staticmethod
    def double_miller_loop(
        prec_P1: AteG1Precomp,
        prec_Q1: Sequence[Fq3ConicCoefficients],
        prec_P2: AteG1Precomp,
        prec_Q2: Sequence[Fq3ConicCoefficients],
    ) -> EdwardsFq6:
        return edwards_ate.double_miller_loop(prec_P1, prec_Q1, prec_P2, prec_Q2)

    @staticmethod
    def pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
        return edwards_ate.pairing(P, Q)

    @staticmethod
    def reduced_pairing(P: EdwardsG1, Q: EdwardsG2) -> EdwardsFq6:
        return edwards_ate.reduced_pairing(P, Q)