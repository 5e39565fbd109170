from .ed import EdPoint
from .scalar import fe, minus1, one, zero

# Curve25519 constant on Montgomery curve: v2 = u3 + A u2 + u
A = fe(486662)  # = fe(2) * (ed.a + ed.d) / (ed.a - ed.d)


def to_edwards_y(u: fe) -> fe:
  """Birational map of a Curve25519 u coordinate to an Ed25519 y coordinate"""
  # u = -1 has no mapping. Field inversion of zero gives zero in the usual
  # C and Go implementations, so y = 0 is what the rest of the world gets.
  if u == minus1: return zero
  return (u - one) / (u + one)


def to_edwards(u: fe, ednegative: bool) -> EdPoint:
  """Convert from Curve25519 u coordinate and a sign for Ed25519"""
  return EdPoint.from_y(to_edwards_y(u), ednegative)
