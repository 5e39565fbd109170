import pytest

from edvrf.elliptic import G, q, tobytes, toscalar
from edvrf.vrf import hash_to_curve
from edvrf.xof import shake256

# Reference prover of the coname VRF, only needed for creating test vectors.
# https://github.com/yahoo/coname/blob/master/vrf/vrf.go


def expand_secret(sk: bytes):
  """Clamped secret scalar x and the extra secret for nonces, from the 32-byte seed"""
  skh = shake256(sk[:32], 64)
  x = bytearray(skh[:32])
  x[0] &= 248
  x[31] &= 127
  x[31] |= 64
  return int.from_bytes(x, "little"), skh[32:]


def keypair(seed: bytes):
  """Return (pk, sk) where sk is seed + pk like in Ed25519"""
  x, _ = expand_secret(seed)
  pk = bytes(x * G)
  return pk, seed + pk


def prove(m: bytes, sk: bytes):
  """Return (vrf, proof) for the message"""
  x, skhr = expand_secret(sk)
  hm = hash_to_curve(m)
  iiB = bytes(x * hm)
  r = toscalar(shake256(skhr + sk[32:] + m, 64))
  A = bytes(r * G)
  hmr = bytes(r * hm)
  c = toscalar(shake256(A + hmr + m, 64))
  t = (r - c * x) % q
  return shake256(iiB + m, 32), tobytes(c) + tobytes(t) + iiB


@pytest.fixture(scope="session")
def keys():
  return keypair(bytes(range(32)))


@pytest.fixture(scope="session")
def vector(keys):
  """A valid (pk, m, vrf, proof) tuple"""
  pk, sk = keys
  m = shake256(b"alice@example.com", 32)
  vrf, proof = prove(m, sk)
  return pk, m, vrf, proof


@pytest.fixture(scope="session")
def prover():
  return prove


@pytest.fixture(scope="session")
def secret(keys):
  """The secret scalar of keys"""
  return expand_secret(keys[1])[0]
