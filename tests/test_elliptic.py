from secrets import token_bytes

import nacl.bindings as sodium
import pytest

from edvrf.elliptic import *
from edvrf.elliptic.ed import d
from edvrf.elliptic.elligator import hash_to_curve


def test_fe():
  assert one + zero == one
  assert zero - one == minus1
  assert fe(1234) / fe(324123) == (fe(324123) / fe(1234)).inv
  assert sqrtm1 * sqrtm1 == -one
  assert repr(fe(1234)) == "fe(1234)"
  assert repr(fe(-1)) == "minus1"
  assert bytes(zero) == bytes(32)
  assert str(one) == "01" + 31 * "00"

  x = fe(toint(token_bytes(32)))
  assert x.sq.sqrt == abs(x)
  assert x.inv.inv == x
  assert x**3 == x * x * x
  assert x * fe(2) == x + x
  assert x * fe(2) != x

  with pytest.raises(ValueError):
    fe(2).sqrt
  with pytest.raises(ValueError):
    zero.inv
  with pytest.raises(TypeError):
    one == 1


def test_scalar_byte_order():
  assert toscalar(b"\x01" + bytes(31)) == 1
  assert toscalar(bytes(31) + b"\x01") == 1 << 248
  assert tobytes(1 << 248) == bytes(31) + b"\x01"
  assert toscalar(tobytes(q)) == 0
  assert toscalar(tobytes(q + 5)) == 5
  assert toscalar((1 << 512) - 1) == ((1 << 512) - 1) % q
  # Wire bytes are the reversal of a big endian number
  b = token_bytes(32)
  assert toscalar(b) == int.from_bytes(b[::-1], "big") % q
  assert toscalar(b"\x01\x02" + bytes(30)) != int.from_bytes(b"\x01\x02" + bytes(30), "big") % q
  # Canonical scalars survive decoding and encoding
  k = toint(token_bytes(32)) % q
  assert toscalar(tobytes(k)) == k
  assert tobytes(toscalar(tobytes(k))) == tobytes(k)
  # 64-byte hashes are reduced too
  h = token_bytes(64)
  assert toscalar(h) == int.from_bytes(h, "little") % q
  assert tobytes(toscalar(h)) == tobytes(int.from_bytes(h, "little") % q)

  with pytest.raises(ValueError):
    toint(bytes(31))


def test_ed():
  assert G == EdPoint.from_bytes(bytes.fromhex("58" + 31 * "66"))
  assert bytes(G).hex() == "58" + 31 * "66"
  assert repr(ZERO) == "ZERO"
  assert repr(G) == "G"
  assert str(ZERO) == "01" + 31 * "00"
  assert G + ZERO == G
  assert G - G == ZERO
  assert 2 * G == G + G
  assert q * G == ZERO
  assert (q + 3) * G == 3 * G


def test_ed_vs_sodium():
  k = toint(token_bytes(32)) % q
  K = k * G
  assert bytes(K).hex() == sodium.crypto_scalarmult_ed25519_base_noclamp(tobytes(k)).hex()

  k2 = toint(token_bytes(32)) % q
  assert bytes(k2 * K).hex() == sodium.crypto_scalarmult_ed25519_noclamp(tobytes(k2), bytes(K)).hex()
  assert bytes(K + G).hex() == sodium.crypto_core_ed25519_add(bytes(K), bytes(G)).hex()
  assert bytes(K - G).hex() == sodium.crypto_core_ed25519_sub(bytes(K), bytes(G)).hex()

  # Decoding sodium's encoding gives back the same point
  assert EdPoint.from_bytes(bytes(K)) == K
  assert EdPoint.from_bytes_basegroup(bytes(K)) == K


def test_from_bytes_basegroup():
  K = (toint(token_bytes(32)) % q) * G
  assert EdPoint.from_bytes_basegroup(bytes(ZERO)) == ZERO

  # Low order and dirty points
  for P in LO[1:]:
    with pytest.raises(ValueError) as exc:
      EdPoint.from_bytes_basegroup(bytes(P))
    assert "prime order group" in str(exc.value)
    with pytest.raises(ValueError):
      EdPoint.from_bytes_basegroup(bytes(K + P))

  # Non-canonical encodings of ZERO: y = p + 1 and x = 0 with the sign set
  for b in tobytes(p + 1), tobytes(1 | 1 << 255):
    assert EdPoint.from_bytes(b) == ZERO
    with pytest.raises(ValueError) as exc:
      EdPoint.from_bytes_basegroup(b)
    assert "Non-canonical" in str(exc.value)

  # Not a point at all
  bad = [y for y in range(2, 20) if not ((fe(y).sq - one) / (d * fe(y).sq + one)).is_square]
  assert bad
  with pytest.raises(ValueError) as exc:
    EdPoint.from_bytes_basegroup(tobytes(bad[0]))
  assert "Not a curve point" in str(exc.value)

  with pytest.raises(ValueError):
    EdPoint.from_bytes(bytes(31))


def test_hashmap():
  # Just hitting the __hash__ functions
  assert len({fe(i * p) for i in range(2)}) == 1
  assert len({i * L for i in range(10)}) == 8


def test_lo():
  assert ZERO.is_low_order
  assert ZERO.subgroup == 0
  assert not ZERO.is_prime_group

  assert G.is_prime_group
  assert not G.is_low_order
  assert G.subgroup == 0

  assert not L.is_prime_group
  assert L.is_low_order
  assert L.subgroup == 1

  assert LO[0] == ZERO
  assert LO[1] == L
  assert repr(LO[0]) == "ZERO"
  assert repr(LO[1]) == "L"
  assert repr(LO[2]) == "LO[2]"
  # x = 0 encodes with the sign bit clear
  assert bytes(LO[4]) == tobytes(p - 1)
  for i, P in enumerate(LO):
    assert 8 * P == ZERO
    assert P.is_low_order
    assert not P.is_prime_group
    assert P.subgroup == i

    Q = (toint(token_bytes(32)) % q) * G + P
    assert not Q.is_low_order
    assert Q.subgroup == i
    assert (8 * Q).is_prime_group


def test_elligator_vs_paper():
  for i in range(5):
    r = fe(toint(token_bytes(32)) & (1 << 255) - 1)
    u, v = hash_to_curve(r)
    assert elligator2(r) == u
    # u is a Curve25519 point
    assert (u**3 + mont.A * u.sq + u).is_square


def test_hash_to_edwards():
  subgroups = set()
  for i in range(16):
    h = bytearray(token_bytes(32))
    P = hash_to_edwards(h)
    assert P == EdPoint.from_bytes(bytes(P))
    # The high bit selects the sign of x, the rest is the representative
    assert P.is_negative == bool(h[31] & 0x80)
    h[31] ^= 0x80
    assert hash_to_edwards(h) == -P
    assert (8 * P).is_prime_group
    subgroups.add(P.subgroup)
    if len(subgroups) > 2: break

  # Elligator points are not confined to the prime group
  assert len(subgroups) > 1, f"Should have found several but got {subgroups=}"

  # Representatives are read mod p
  assert hash_to_edwards(tobytes(p + 7)) == hash_to_edwards(tobytes(7))
  assert hash_to_edwards(tobytes(0)) == hash_to_edwards(tobytes(p))

  with pytest.raises(ValueError):
    hash_to_edwards(bytes(16))


def test_mont_to_edwards():
  assert mont.to_edwards_y(fe(9)) == G.y
  assert mont.to_edwards(fe(9), False) == G
  assert mont.to_edwards(fe(9), True) == -G
  assert mont.to_edwards_y(zero) == minus1
  # No birational mapping for u = -1, y = 0 as with a zero field inverse
  assert mont.to_edwards_y(minus1) == zero
  assert mont.to_edwards(minus1, False).y == zero
