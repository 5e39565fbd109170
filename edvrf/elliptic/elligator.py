# Elligator 2 over Curve25519, see section 5 of
# https://www.shiftleft.org/papers/elligator/elligator.pdf
#
# Only the direction from a random string to a curve point is needed here.
# The resulting point is converted to Ed25519 and may be anywhere in the full
# curve group, including the small subgroups. Callers that need a prime group
# point must multiply by the cofactor 8 themselves.
#
# The bit layout follows HashToEdwards of the extra25519 package that VRF
# implementations (coname, e2e) are built on: the low 255 bits of the string
# are the representative and the high bit is the sign of the Ed25519 x.

from .ed import EdPoint
from .mont import A, to_edwards
from .scalar import fe, one
from .util import tointsign

# Arbitrary non square, 2 is used by all common implementations.
non_square = fe(2)


def elligator2(r: fe) -> fe:
  """Map a field element to the u coordinate of a Curve25519 point"""
  w = -A / (one + non_square * r**2)
  e = (w**3 + A * w**2 + w).chi
  # Either w or -w - A is the u coordinate of a curve point
  return w if e == one else -w - A


def hash_to_edwards(h: bytes) -> EdPoint:
  """
  Convert a 32-byte hash into an Ed25519 point with uniform distribution.

  The point is not multiplied by 8.
  """
  r, sign = tointsign(h)
  return to_edwards(elligator2(fe(r)), sign)


def hash_to_curve(r: fe):
  """Reference implementation of S to point, straight from the paper"""
  w = -A / (one + non_square * r**2)
  e = (w**3 + A * w**2 + w).chi
  u = e * w - (one - e) * (A / fe(2))
  v = -e * (u**3 + A * u**2 + u).sqrt
  return u, v
