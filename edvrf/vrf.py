from typing import NamedTuple

from .elliptic import ZERO, EdPoint, G, hash_to_edwards, toscalar
from .exceptions import (ArithmeticDomainFault, ChallengeMismatch, InputLengthInvalid, OutputMismatch,
                         PointDecodeFailed)
from .xof import shake256

# Verification of the Ed25519 VRF with SHAKE256 and Elligator hashing that is
# used by the coname keyserver and the Yahoo End-To-End extension.
# https://github.com/yahoo/coname/blob/master/vrf/vrf.go

# Proofs and outputs are public, so everything here is variable time.

PUBLIC_KEY_SIZE = 32
MESSAGE_SIZE = 32  # Conventional, messages of any length are accepted
VRF_SIZE = 32
INTERMEDIATE_SIZE = 32
PROOF_SIZE = 32 + 32 + INTERMEDIATE_SIZE


class Proof(NamedTuple):
  """Decoded proof: challenge scalar c, response scalar t and the encoded point ii."""
  c: int
  t: int
  iiB: bytes


def as_bytes(data) -> bytes:
  try:
    return bytes(memoryview(data))
  except TypeError:
    raise InputLengthInvalid(f"Expected a byte string, got {type(data).__name__}") from None


def decode_proof(proof) -> Proof:
  """Split a 96-byte proof into its little endian scalars and the raw point encoding."""
  proof = as_bytes(proof)
  if len(proof) != PROOF_SIZE:
    raise InputLengthInvalid(f"Proof should be {PROOF_SIZE} bytes, got {len(proof)}")
  return Proof(toscalar(proof[:32]), toscalar(proof[32:64]), proof[64:])


def hash_to_curve(m: bytes) -> EdPoint:
  """
  Map a message to a point of the prime order group.

  The SHAKE256 hash of the message is mapped onto the curve with Elligator 2
  and the cofactor cleared by doubling three times.
  """
  hm = hash_to_edwards(shake256(m, 32))
  hm += hm
  hm += hm
  hm += hm
  return hm


def check(pk, m, vrf, proof) -> None:
  """
  Verify that vrf is the output for message m under public key pk.

  Use verify() instead where the reason of failure must not be exposed.

  :raises VrfError: the subclass tells which check failed
  """
  pk, m, vrf = as_bytes(pk), as_bytes(m), as_bytes(vrf)
  if len(pk) != PUBLIC_KEY_SIZE:
    raise InputLengthInvalid(f"Public key should be {PUBLIC_KEY_SIZE} bytes, got {len(pk)}")
  if len(vrf) != VRF_SIZE:
    raise InputLengthInvalid(f"VRF output should be {VRF_SIZE} bytes, got {len(vrf)}")
  c, t, iiB = decode_proof(proof)

  # The output must be the hash of the intermediate point, cheap to check first
  if shake256(iiB + m, VRF_SIZE) != vrf:
    raise OutputMismatch("VRF output does not match the proof")

  try:
    P = EdPoint.from_bytes_basegroup(pk)
  except ValueError:
    raise PointDecodeFailed("Invalid public key provided") from None
  try:
    ii = EdPoint.from_bytes_basegroup(iiB)
  except ValueError:
    raise PointDecodeFailed("Invalid intermediate point on proof") from None

  try:
    # A = r * G and witness = r * hm for an honest prover with t = r - c * x
    A = c * P + t * G
    hm = hash_to_curve(m)
    # Adding the neutral element follows the double scalar multiplication of the reference
    witness = (t * hm + ZERO) + (c * ii + ZERO)
    cH = shake256(bytes(A) + bytes(witness) + m, 64)
  except (ValueError, ArithmeticError) as e:
    raise ArithmeticDomainFault(f"Curve arithmetic failed: {e}") from e

  if toscalar(cH) != c:
    raise ChallengeMismatch("Proof challenge mismatch")


def verify(pk, m, vrf, proof) -> bool:
  """
  Return True if vrf is correctly proven to be the output for m under pk.

  All failures give False, and no exceptions are raised for any inputs.
  """
  try:
    check(pk, m, vrf, proof)
  except (ValueError, ArithmeticError, TypeError):
    return False
  return True
