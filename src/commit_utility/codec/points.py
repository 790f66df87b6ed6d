"""Canonical-encoding checks for commitment payloads.

The producer only ever writes canonical group elements, so a payload that
fails these checks is corrupt. Points are checked, never decompressed into
coordinates.

- Ristretto255 points use the decoding procedure of RFC 9496 section 4.3.1.
- Dory target-group elements are twelve little-endian BLS12-381 base field
  coefficients, each of which must be reduced modulo the field prime.
"""

from __future__ import annotations

# Curve25519 base field
ED25519_PRIME = 2**255 - 19
ED25519_D = (-121665 * pow(121666, ED25519_PRIME - 2, ED25519_PRIME)) % ED25519_PRIME
SQRT_M1 = pow(2, (ED25519_PRIME - 1) // 4, ED25519_PRIME)

# BLS12-381 base field
BLS12_381_PRIME = int(
    "1a0111ea397fe69a4b1ba7b6434bacd764774b84f38512bf"
    "6730d2a0f6b0f6241eabfffeb153ffffb9feffffffffaaab",
    16,
)
FQ_SIZE = 48
FQ12_COEFFICIENTS = 12


def _is_negative(value: int) -> bool:
    return value % ED25519_PRIME & 1 == 1


def _abs(value: int) -> int:
    value %= ED25519_PRIME
    return ED25519_PRIME - value if _is_negative(value) else value


def _sqrt_ratio_m1(u: int, v: int) -> tuple[bool, int]:
    """Return (was_square, sqrt(u/v)) in the field, or sqrt(i*u/v) if not square."""
    p = ED25519_PRIME
    v3 = v * v % p * v % p
    v7 = v3 * v3 % p * v % p
    r = u * v3 % p * pow(u * v7 % p, (p - 5) // 8, p) % p
    check = v * r % p * r % p

    correct_sign = check == u % p
    flipped_sign = check == -u % p
    flipped_sign_i = check == -u * SQRT_M1 % p
    if flipped_sign or flipped_sign_i:
        r = r * SQRT_M1 % p
    return correct_sign or flipped_sign, _abs(r)


def is_valid_ristretto_point(data: bytes) -> bool:
    """Return whether ``data`` is the canonical encoding of a ristretto255 point.

    Example:
        >>> is_valid_ristretto_point(bytes(32))
        True
        >>> is_valid_ristretto_point(b"\\xff" * 32)
        False
    """
    if len(data) != 32:
        return False

    p = ED25519_PRIME
    s = int.from_bytes(data, "little")
    if s >= p or _is_negative(s):
        return False

    ss = s * s % p
    u1 = (1 - ss) % p
    u2 = (1 + ss) % p
    u2_sqr = u2 * u2 % p
    v = (-(ED25519_D * u1 % p * u1) - u2_sqr) % p

    was_square, invsqrt = _sqrt_ratio_m1(1, v * u2_sqr % p)
    den_x = invsqrt * u2 % p
    den_y = invsqrt * den_x % p * v % p

    x = _abs(2 * s * den_x)
    y = u1 * den_y % p
    t = x * y % p
    return was_square and not _is_negative(t) and y != 0


def is_canonical_gt_element(data: bytes) -> bool:
    """Return whether every Fq coefficient of a serialized Fq12 is reduced."""
    if len(data) != FQ_SIZE * FQ12_COEFFICIENTS:
        return False
    return all(
        int.from_bytes(data[offset : offset + FQ_SIZE], "little") < BLS12_381_PRIME
        for offset in range(0, len(data), FQ_SIZE)
    )
