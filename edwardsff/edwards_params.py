"""Fields and curve parameters of the Edwards curve over a 183-bit prime.

The scalar field Fr has a 181-bit modulus and the base field Fq a 183-bit
one. Fq3 is Fq[u]/(u^3 - 61) and Fq6 is Fq3[w]/(w^2 - u). The module also
fixes the curve coefficients, the twist, the group generators, the window
tables used by multi-exponentiation and the pairing constants.
"""

from __future__ import annotations

import operator
import secrets
from typing import Any, ClassVar

from .algorithms import power, tonelli_shanks_sqrt
from .bigint import LIMB_BITS, Bigint

R_BITCOUNT = 181
Q_BITCOUNT = 183
R_LIMBS = -(-R_BITCOUNT // LIMB_BITS)
Q_LIMBS = -(-Q_BITCOUNT // LIMB_BITS)

MODULUS_R = 1552511030102430251236801561344621993261920897571225601
MODULUS_Q = 6210044120409721004947206240885978274523751269793792001


def _parse_decimal(text: str) -> int:
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


def _exponent(exponent: Any) -> int:
    return operator.index(exponent)


class PrimeFieldElement:
    """An element of a prime field; subclasses fix the modulus and parameters."""

    __slots__ = ("_value",)

    modulus: ClassVar[int] = 0
    limbs: ClassVar[int] = 1
    num_bits: ClassVar[int] = 0
    euler: ClassVar[int]
    s: ClassVar[int]
    t: ClassVar[int]
    t_minus_1_over_2: ClassVar[int]
    multiplicative_generator: ClassVar[Any]
    root_of_unity: ClassVar[Any]
    nqr: ClassVar[Any]
    nqr_to_t: ClassVar[Any]

    def __init__(self, value: Any = 0) -> None:
        cls = type(self)
        if not cls.modulus:
            raise TypeError(f"{cls.__name__} has no modulus")
        if isinstance(value, cls):
            number = value._value
        elif isinstance(value, PrimeFieldElement):
            raise TypeError(
                f"cannot make {cls.__name__} from {type(value).__name__}"
            )
        elif isinstance(value, str):
            number = _parse_decimal(value)
        else:
            number = operator.index(value)
        self._value = number % cls.modulus

    @classmethod
    def _new(cls, value: int) -> Any:
        element = object.__new__(cls)
        element._value = value
        return element

    @classmethod
    def zero(cls) -> Any:
        return cls._new(0)

    @classmethod
    def one(cls) -> Any:
        return cls._new(1)

    @classmethod
    def random_element(cls) -> Any:
        return cls._new(secrets.randbelow(cls.modulus))

    @classmethod
    def field_char(cls) -> Bigint:
        """The modulus as a Bigint of the field's limb count."""
        return Bigint(cls.modulus, cls.limbs)

    @classmethod
    def ceil_size_in_bits(cls) -> int:
        return cls.num_bits

    def _coerce(self, other: Any) -> Any:
        if type(other) is type(self):
            return other
        if isinstance(other, int):
            return type(self)(other)
        return None

    def __add__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new((self._value + o._value) % self.modulus)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new((self._value - o._value) % self.modulus)

    def __rsub__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new((o._value - self._value) % self.modulus)

    def __mul__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new((self._value * o._value) % self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Any:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __neg__(self) -> Any:
        return self._new((-self._value) % self.modulus)

    def __pow__(self, exponent: Any) -> Any:
        e = _exponent(exponent)
        if e < 0:
            return self.inverse() ** -e
        return self._new(pow(self._value, e, self.modulus))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def is_zero(self) -> bool:
        return self._value == 0

    def squared(self) -> Any:
        return self * self

    def inverse(self) -> Any:
        if self._value == 0:
            raise ZeroDivisionError("cannot invert zero")
        return self._new(pow(self._value, -1, self.modulus))

    def sqrt(self) -> Any:
        """A square root; raises ValueError for a non-residue."""
        return tonelli_shanks_sqrt(self)

    def as_int(self) -> int:
        return self._value

    def as_bigint(self) -> Bigint:
        return Bigint(self._value, self.limbs)


class EdwardsFr(PrimeFieldElement):
    """The scalar field of the Edwards groups."""

    __slots__ = ()

    modulus = MODULUS_R
    limbs = R_LIMBS
    num_bits = 181
    euler = 776255515051215125618400780672310996630960448785612800
    s = 31
    t = 722944284836962004768104088187507350585386575
    t_minus_1_over_2 = 361472142418481002384052044093753675292693287


EdwardsFr.multiplicative_generator = EdwardsFr(19)
EdwardsFr.root_of_unity = EdwardsFr(
    695314865466598274460565335217615316274564719601897184
)
EdwardsFr.nqr = EdwardsFr(11)
EdwardsFr.nqr_to_t = EdwardsFr(
    1326707053668679463752768729767248251415639579872144553
)


class EdwardsFq(PrimeFieldElement):
    """The base field of the Edwards curve."""

    __slots__ = ()

    modulus = MODULUS_Q
    limbs = Q_LIMBS
    num_bits = 183
    euler = 3105022060204860502473603120442989137261875634896896000
    s = 31
    t = 2891777139347848019072416350658041552884388375
    t_minus_1_over_2 = 1445888569673924009536208175329020776442194187


EdwardsFq.multiplicative_generator = EdwardsFq(61)
EdwardsFq.root_of_unity = EdwardsFq(
    4692813029219384139894873043933463717810008194158530536
)
EdwardsFq.nqr = EdwardsFq(23)
EdwardsFq.nqr_to_t = EdwardsFq(
    2626736066325740702418554487368721595489070118548299138
)


class EdwardsFq3:
    """An element c0 + c1*u + c2*u^2 of Fq[u]/(u^3 - non_residue)."""

    __slots__ = ("c0", "c1", "c2")

    non_residue: ClassVar[EdwardsFq] = EdwardsFq(61)
    euler: ClassVar[int] = int(
        "119744082713971502962992613191067836698205043373978948903839934564152994"
        "858051284658545502971203325031831647424413111161318314144765646525057914"
        "792711854057586688000"
    )
    s: ClassVar[int] = 31
    t: ClassVar[int] = int(
        "111520367408144756185815309352304634357062208814526860512643991563611659"
        "089151103662834971185031649686239331424621037357783237607000066456438894"
        "190557165125"
    )
    t_minus_1_over_2: ClassVar[int] = int(
        "557601837040723780929076546761523171785311044072634302563219957818058295"
        "445755518314174855925158248431196657123105186788916188035000332282194470"
        "95278582562"
    )
    nqr: ClassVar[EdwardsFq3]
    nqr_to_t: ClassVar[EdwardsFq3]
    frobenius_coeffs_c1: ClassVar[tuple[EdwardsFq, ...]]
    frobenius_coeffs_c2: ClassVar[tuple[EdwardsFq, ...]]

    def __init__(self, c0: Any = 0, c1: Any = 0, c2: Any = 0) -> None:
        self.c0 = EdwardsFq(c0)
        self.c1 = EdwardsFq(c1)
        self.c2 = EdwardsFq(c2)

    @classmethod
    def zero(cls) -> EdwardsFq3:
        return cls(0, 0, 0)

    @classmethod
    def one(cls) -> EdwardsFq3:
        return cls(1, 0, 0)

    @classmethod
    def random_element(cls) -> EdwardsFq3:
        return cls(
            EdwardsFq.random_element(),
            EdwardsFq.random_element(),
            EdwardsFq.random_element(),
        )

    @classmethod
    def ceil_size_in_bits(cls) -> int:
        return 3 * EdwardsFq.ceil_size_in_bits()

    @staticmethod
    def _coerce(other: Any) -> EdwardsFq3 | None:
        if isinstance(other, EdwardsFq3):
            return other
        if isinstance(other, (EdwardsFq, int)):
            return EdwardsFq3(other, 0, 0)
        return None

    def __add__(self, other: Any) -> EdwardsFq3:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return EdwardsFq3(self.c0 + o.c0, self.c1 + o.c1, self.c2 + o.c2)

    __radd__ = __add__

    def __sub__(self, other: Any) -> EdwardsFq3:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return EdwardsFq3(self.c0 - o.c0, self.c1 - o.c1, self.c2 - o.c2)

    def __rsub__(self, other: Any) -> EdwardsFq3:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __neg__(self) -> EdwardsFq3:
        return EdwardsFq3(-self.c0, -self.c1, -self.c2)

    def __mul__(self, other: Any) -> EdwardsFq3:
        if isinstance(other, (EdwardsFq, int)):
            k = EdwardsFq(other)
            return EdwardsFq3(k * self.c0, k * self.c1, k * self.c2)
        if not isinstance(other, EdwardsFq3):
            return NotImplemented
        a0, a1, a2 = self.c0, self.c1, self.c2
        b0, b1, b2 = other.c0, other.c1, other.c2
        nr = self.non_residue
        a0b0 = a0 * b0
        a1b1 = a1 * b1
        a2b2 = a2 * b2
        return EdwardsFq3(
            a0b0 + nr * ((a1 + a2) * (b1 + b2) - a1b1 - a2b2),
            (a0 + a1) * (b0 + b1) - a0b0 - a1b1 + nr * a2b2,
            (a0 + a2) * (b0 + b2) - a0b0 + a1b1 - a2b2,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> EdwardsFq3:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __pow__(self, exponent: Any) -> EdwardsFq3:
        e = _exponent(exponent)
        if e < 0:
            return power(self.inverse(), -e)
        return power(self, e)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsFq3):
            return NotImplemented
        return (self.c0, self.c1, self.c2) == (other.c0, other.c1, other.c2)

    def __hash__(self) -> int:
        return hash((self.c0, self.c1, self.c2))

    def __repr__(self) -> str:
        return f"EdwardsFq3({self.c0}, {self.c1}, {self.c2})"

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero() and self.c2.is_zero()

    def squared(self) -> EdwardsFq3:
        return self * self

    def inverse(self) -> EdwardsFq3:
        a0, a1, a2 = self.c0, self.c1, self.c2
        nr = self.non_residue
        c0 = a0.squared() - nr * (a1 * a2)
        c1 = nr * a2.squared() - a0 * a1
        c2 = a1.squared() - a0 * a2
        norm_inverse = (a0 * c0 + nr * (a2 * c1 + a1 * c2)).inverse()
        return EdwardsFq3(norm_inverse * c0, norm_inverse * c1, norm_inverse * c2)

    def sqrt(self) -> EdwardsFq3:
        """A square root; raises ValueError for a non-residue."""
        return tonelli_shanks_sqrt(self)

    def frobenius_map(self, power: int) -> EdwardsFq3:
        """Raise to the q^power by scaling the coefficients."""
        index = power % 3
        return EdwardsFq3(
            self.c0,
            self.frobenius_coeffs_c1[index] * self.c1,
            self.frobenius_coeffs_c2[index] * self.c2,
        )


EdwardsFq3.nqr = EdwardsFq3(23, 0, 0)
EdwardsFq3.nqr_to_t = EdwardsFq3(
    104810943629412208121981114244673004633270996333237516, 0, 0
)
EdwardsFq3.frobenius_coeffs_c1 = (
    EdwardsFq(1),
    EdwardsFq(1073752683758513276629212192812154536507607213288832061),
    EdwardsFq(5136291436651207728317994048073823738016144056504959939),
)
EdwardsFq3.frobenius_coeffs_c2 = (
    EdwardsFq(1),
    EdwardsFq(5136291436651207728317994048073823738016144056504959939),
    EdwardsFq(1073752683758513276629212192812154536507607213288832061),
)


def _to_fq3(value: Any) -> EdwardsFq3:
    if isinstance(value, EdwardsFq3):
        return value
    return EdwardsFq3(value, 0, 0)


class EdwardsFq6:
    """An element c0 + c1*w of Fq3[w]/(w^2 - u); the pairing target group."""

    __slots__ = ("c0", "c1")

    non_residue: ClassVar[EdwardsFq] = EdwardsFq(61)
    euler: ClassVar[int] = int(
        "286772906900208978053659358438511744950463073927050691441013733733308852"
        "103113703187330276692859302954336930908810347208181904968549176866575351"
        "093481768308610598000"
        "124747224712920220052869088935414165997427895231437379597082144618706058"
        "741210902723225170736986704573334983412502412971202205510995216786766770"
        "16084977733861376000"
    )
    s: ClassVar[int] = 32
    t: ClassVar[int] = int(
        "133539040992133774819625242817453921283810899558966370039160239386050427"
        "380536544689596759478030401726410226388280441615815230164932635084993835"
        "116495270425738113932"
        "369624834839683128545465454894776533356601323574519427305591360022642677"
        "063686262221646109007758416502426836366067832788081004056611664959586584"
        "08413165125"
    )
    t_minus_1_over_2: ClassVar[int] = int(
        "667695204960668874098126214087269606419054497794831850195801196930252136"
        "902682723447983797390152008632051131941402208079076150824663175424969175"
        "582476352128690569661"
        "848124174198415642727327274473882666783006617872597136527956800113213385"
        "318431311108230545038792082512134181830339163940405020283058324797932920"
        "4206582562"
    )
    nqr: ClassVar[EdwardsFq6]
    nqr_to_t: ClassVar[EdwardsFq6]
    frobenius_coeffs_c1: ClassVar[tuple[EdwardsFq, ...]]

    def __init__(self, c0: Any = 0, c1: Any = 0) -> None:
        self.c0 = _to_fq3(c0)
        self.c1 = _to_fq3(c1)

    @classmethod
    def zero(cls) -> EdwardsFq6:
        return cls(EdwardsFq3.zero(), EdwardsFq3.zero())

    @classmethod
    def one(cls) -> EdwardsFq6:
        return cls(EdwardsFq3.one(), EdwardsFq3.zero())

    @classmethod
    def random_element(cls) -> EdwardsFq6:
        return cls(EdwardsFq3.random_element(), EdwardsFq3.random_element())

    @classmethod
    def ceil_size_in_bits(cls) -> int:
        return 2 * EdwardsFq3.ceil_size_in_bits()

    @staticmethod
    def mul_by_non_residue(elt: EdwardsFq3) -> EdwardsFq3:
        """Multiply an Fq3 element by u, the square of w."""
        return EdwardsFq3(EdwardsFq6.non_residue * elt.c2, elt.c0, elt.c1)

    @staticmethod
    def _coerce(other: Any) -> EdwardsFq6 | None:
        if isinstance(other, EdwardsFq6):
            return other
        if isinstance(other, (EdwardsFq3, EdwardsFq, int)):
            return EdwardsFq6(other, 0)
        return None

    def __add__(self, other: Any) -> EdwardsFq6:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return EdwardsFq6(self.c0 + o.c0, self.c1 + o.c1)

    __radd__ = __add__

    def __sub__(self, other: Any) -> EdwardsFq6:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return EdwardsFq6(self.c0 - o.c0, self.c1 - o.c1)

    def __rsub__(self, other: Any) -> EdwardsFq6:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __neg__(self) -> EdwardsFq6:
        return EdwardsFq6(-self.c0, -self.c1)

    def __mul__(self, other: Any) -> EdwardsFq6:
        if isinstance(other, (EdwardsFq3, EdwardsFq, int)):
            return EdwardsFq6(self.c0 * other, self.c1 * other)
        if not isinstance(other, EdwardsFq6):
            return NotImplemented
        a, b = self.c0, self.c1
        A, B = other.c0, other.c1
        aA = a * A
        bB = b * B
        return EdwardsFq6(
            aA + self.mul_by_non_residue(bB),
            (a + b) * (A + B) - aA - bB,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> EdwardsFq6:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __pow__(self, exponent: Any) -> EdwardsFq6:
        e = _exponent(exponent)
        if e < 0:
            return power(self.inverse(), -e)
        return power(self, e)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsFq6):
            return NotImplemented
        return self.c0 == other.c0 and self.c1 == other.c1

    def __hash__(self) -> int:
        return hash((self.c0, self.c1))

    def __repr__(self) -> str:
        return f"EdwardsFq6({self.c0!r}, {self.c1!r})"

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def squared(self) -> EdwardsFq6:
        a, b = self.c0, self.c1
        ab = a * b
        return EdwardsFq6(a.squared() + self.mul_by_non_residue(b.squared()), ab + ab)

    def inverse(self) -> EdwardsFq6:
        a, b = self.c0, self.c1
        norm = a.squared() - self.mul_by_non_residue(b.squared())
        norm_inverse = norm.inverse()
        return EdwardsFq6(a * norm_inverse, -(b * norm_inverse))

    def unitary_inverse(self) -> EdwardsFq6:
        """The conjugate, which is the inverse in the cyclotomic subgroup."""
        return EdwardsFq6(self.c0, -self.c1)

    def frobenius_map(self, power: int) -> EdwardsFq6:
        """Raise to the q^power."""
        return EdwardsFq6(
            self.c0.frobenius_map(power),
            self.frobenius_coeffs_c1[power % 6] * self.c1.frobenius_map(power),
        )

    def cyclotomic_exp(self, exponent: Any) -> EdwardsFq6:
        """Exponentiation for elements of the cyclotomic subgroup, by signed digits."""
        e = _exponent(exponent)
        if e < 0:
            raise ValueError("exponent cannot be negative")
        digits = []
        while e > 0:
            if e & 1:
                digit = 2 - (e & 3)
                e -= digit
            else:
                digit = 0
            digits.append(digit)
            e >>= 1

        inverse = self.unitary_inverse()
        result = EdwardsFq6.one()
        found_nonzero = False
        for digit in reversed(digits):
            if found_nonzero:
                result = result.squared()
            if digit:
                found_nonzero = True
                result = result * (self if digit > 0 else inverse)
        return result


EdwardsFq6.nqr = EdwardsFq6(EdwardsFq3(5, 0, 0), EdwardsFq3.one())
EdwardsFq6.nqr_to_t = EdwardsFq6(
    EdwardsFq3.zero(),
    EdwardsFq3(0, 6018622460271751604575462891699668290753365582464183006, 0),
)
EdwardsFq6.frobenius_coeffs_c1 = (
    EdwardsFq(1),
    EdwardsFq(1073752683758513276629212192812154536507607213288832062),
    EdwardsFq(1073752683758513276629212192812154536507607213288832061),
    EdwardsFq(6210044120409721004947206240885978274523751269793792000),
    EdwardsFq(5136291436651207728317994048073823738016144056504959939),
    EdwardsFq(5136291436651207728317994048073823738016144056504959940),
)

EdwardsGT = EdwardsFq6

# The curve E_{1,d}(Fq) and its twist E_{a',d'}(Fq3).
COEFF_A = EdwardsFq.one()
COEFF_D = EdwardsFq(600581931845324488256649384912508268813600056237543024)
TWIST = EdwardsFq3(0, 1, 0)
TWIST_COEFF_A = COEFF_A * TWIST
TWIST_COEFF_D = COEFF_D * TWIST
TWIST_MUL_BY_A_C0 = COEFF_A * EdwardsFq3.non_residue
TWIST_MUL_BY_A_C1 = COEFF_A
TWIST_MUL_BY_A_C2 = COEFF_A
TWIST_MUL_BY_D_C0 = COEFF_D * EdwardsFq3.non_residue
TWIST_MUL_BY_D_C1 = COEFF_D
TWIST_MUL_BY_D_C2 = COEFF_D
TWIST_MUL_BY_Q_Y = EdwardsFq(1073752683758513276629212192812154536507607213288832062)
TWIST_MUL_BY_Q_Z = EdwardsFq(1073752683758513276629212192812154536507607213288832062)

# Affine (x, y) of the identity and the generator of G1.
G1_ZERO_XY = (EdwardsFq.zero(), EdwardsFq.one())
G1_ONE_XY = (
    EdwardsFq(3713709671941291996998665608188072510389821008693530490),
    EdwardsFq(4869953702976555123067178261685365085639705297852816679),
)
G1_WNAF_WINDOW_TABLE = (9, 14, 24, 117)
G1_FIXED_BASE_EXP_WINDOW_TABLE = (
    1, 4, 10, 25, 60, 149, 370, 849, 1765, 4430, 13389, 15368, 74912, 0,
    438107, 0, 1045626, 1577434, 0, 0, 17350594, 0,
)

# Affine (x, y) of the identity and the generator of G2.
G2_ZERO_XY = (EdwardsFq3.zero(), EdwardsFq3.one())
G2_ONE_XY = (
    EdwardsFq3(
        4531683359223370252210990718516622098304721701253228128,
        5339624155305731263217400504407647531329993548123477368,
        3964037981777308726208525982198654699800283729988686552,
    ),
    EdwardsFq3(
        364634864866983740775341816274081071386963546650700569,
        3264380230116139014996291397901297105159834497864380415,
        3504781284999684163274269077749440837914479176282903747,
    ),
)
G2_WNAF_WINDOW_TABLE = (6, 12, 42, 97)
G2_FIXED_BASE_EXP_WINDOW_TABLE = (
    1, 5, 11, 26, 61, 146, 357, 823, 1589, 4136, 14298, 16745, 51769, 99811,
    193307, 0, 907185, 1389683, 0, 6752696, 193642895, 226760202,
)

# Pairing parameters.
ATE_LOOP_COUNT = Bigint(4492509698523932320491110403, Q_LIMBS)
FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0 = Bigint(17970038794095729281964441603, Q_LIMBS)
FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG = True
FINAL_EXPONENT_LAST_CHUNK_W1 = Bigint(4, Q_LIMBS)