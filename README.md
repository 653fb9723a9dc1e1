# edwardsff

Arithmetic on an Edwards curve whose groups have a 181-bit prime order,
over a 183-bit base field, together with its degree-3 and degree-6
extension fields and the Tate and ate pairings, in pure Python with no
dependencies.

## What is inside

- `edwardsff.bigint.Bigint`: a fixed-width unsigned integer made of 64-bit
  limbs, with comparison, parity, bit access (`test_bit`, `num_bits`,
  `max_bits`), `hex()`, `clear()` and `randomize()`.
- `edwardsff.algorithms`: `power(base, exponent)` by square-and-multiply,
  where the exponent is an int, a `Bigint` or a list of 64-bit words with
  the least significant first; and `tonelli_shanks_sqrt(value)`, which
  raises `ValueError` for a non-residue.
- `edwardsff.field_utils`: `batch_invert`, `get_root_of_unity`,
  `coset_shift`, the `FieldType` enum, and conversions between bit vectors
  (lists of bools, least significant bit first) and field elements.
- `edwardsff.curve_utils.scalar_mul`: double-and-add scalar multiplication
  for any group type with `zero()`, `dbl()` and `+`.
- `edwardsff.edwards_params`: the fields `EdwardsFr` (scalars), `EdwardsFq`
  (base field), `EdwardsFq3 = Fq[u]/(u^3 - 61)` and
  `EdwardsFq6 = Fq3[w]/(w^2 - u)`, plus the curve coefficients, twist
  constants, generators, window tables and pairing constants. All of them
  are fixed when the module is imported.
- `edwardsff.edwards_g1.EdwardsG1` and `edwardsff.edwards_g2.EdwardsG2`:
  points of the curve and of its twist over `EdwardsFq3`, held in inverted
  coordinates. `to_affine_coordinates()` returns the affine `(x, y)`;
  `to_special()` and `batch_to_special_all_non_zeros()` scale points in
  place so that `Z` is one. `EdwardsG2.mul_by_q()` applies the Frobenius
  endomorphism.
- `edwardsff.edwards_tate`: final exponentiation and the Tate pairing
  (`tate_precompute_g1`, `tate_precompute_g2`, `tate_miller_loop`,
  `tate_pairing`, `tate_reduced_pairing`).
- `edwardsff.edwards_ate`: the ate pairing (`ate_precompute_g1`,
  `ate_precompute_g2`, `ate_miller_loop`, `ate_double_miller_loop`,
  `ate_pairing`, `ate_reduced_pairing`) and the default names
  `precompute_g1`, `precompute_g2`, `miller_loop`, `double_miller_loop`,
  `pairing` and `reduced_pairing`, which use it.
- `edwardsff.edwards_pp.EdwardsPP`: the curve's types and its default
  pairing operations in one class.

## Example

```python
from edwardsff.edwards_g1 import EdwardsG1
from edwardsff.edwards_g2 import EdwardsG2
from edwardsff.edwards_params import EdwardsFr
from edwardsff.edwards_pp import EdwardsPP

P = EdwardsG1.one()
Q = EdwardsG2.one()
a = EdwardsFr(5)
b = EdwardsFr(7)

lhs = EdwardsPP.reduced_pairing(a * P, b * Q)
rhs = EdwardsPP.reduced_pairing(P, Q)
assert lhs == rhs ** ((a * b).as_int())
```

Points can be added, subtracted, negated and multiplied by non-negative
integers, `Bigint` values or scalar-field elements:

```python
R = 3 * P + P.dbl() - P
assert R.is_well_formed()
assert EdwardsG1.order() * P == EdwardsG1.zero()
```

## What it does not do

- There is no reading or writing of points, field elements or pairing
  precomputations as text or bytes, and no point compression.
- There is no affine-coordinate pairing; `EdwardsPP.has_affine_pairing` is
  `False`.
- The code is written for clarity, not speed, and makes no attempt at
  constant-time arithmetic.

## Running the tests

```
pip install -e .[test]
pytest
```