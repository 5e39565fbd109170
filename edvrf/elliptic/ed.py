from __future__ import annotations

from functools import cached_property
from typing import Optional

from .scalar import fe, minus1, one, q, zero
from .util import tobytes, tointsign

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Ed25519 constants:
a, d = minus1, -fe(121665) / fe(121666)

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z

class EdPoint:
  def __init__(self, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  @staticmethod
  def from_bytes(b) -> EdPoint:
    """Decompress a standard 32-byte Ed25519 point (y with the sign of x on the high bit)"""
    val, sign = tointsign(b)
    return EdPoint.from_y(fe(val), sign)

  @staticmethod
  def from_bytes_basegroup(b) -> EdPoint:
    """
    Decompress a point that must be canonically encoded and in the prime order group.

    :raises ValueError: if the bytes are not such a point
    """
    P = EdPoint.from_bytes(b)
    if bytes(P) != bytes(b): raise ValueError("Non-canonical encoding of Ed25519 point")
    if q * P != ZERO: raise ValueError("Ed25519 point is not in the prime order group")
    return P

  @staticmethod
  def from_y(y: fe, negative=False) -> EdPoint:
    """Restore from a y coordinate and the sign (parity) of x"""
    x2 = (y.sq - one) / (d * y.sq + one)
    if not x2.is_square: raise ValueError("Not a curve point on Ed25519")
    P = EdPoint(x2.sqrt, y)
    return P if P.is_negative == negative else -P

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes(self.y.val + (self.is_negative << 255))
  def __hash__(self): return self.y.val

  @cached_property
  def norm(self) -> EdPoint:
    """Return a normalized point, with Z=1."""
    return EdPoint(self.x, self.y)

  @cached_property
  def is_negative(self) -> bool:
    """The sign of the point is the parity of its x coordinate."""
    return self.x.bit(0)

  @cached_property
  def subgroup(self) -> int:
    """Return the subgroup (0..7) where 0 is the prime group"""
    return LO_index[LO.index(q * self)]

  @cached_property
  def is_low_order(self) -> bool: return self in LO

  @cached_property
  def is_prime_group(self) -> bool: return not self.is_low_order and self.subgroup == 0

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    A = (self.Y - self.X) * (othr.Y - othr.X)
    B = (self.Y + self.X) * (othr.Y + othr.X)
    C = fe(2) * self.T * othr.T * d
    D = fe(2) * self.Z * othr.Z
    E, F, G, H = B - A, D - C, D + C, B + A
    return EdPoint(E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by a scalar (variable time, public values only)."""
    if not isinstance(s, int): return NotImplemented
    Q = ZERO
    P = self
    # 8 * q rather than q so that low order components are preserved
    s %= 8 * q
    while s > 0:
      if s & 1: Q += P
      P += P
      s >>= 1
    return Q.norm

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) == zero and
      (self.Y * othr.Z - othr.Y * self.Z) == zero
    )

# Neutral element
ZERO = EdPoint(zero, one)

# Base point (prime group generator)
G = EdPoint.from_y(fe(4) / fe(5), False)

# Low order generator
L = EdPoint.from_y((minus1 * ((d + one).sqrt + one) / d).sqrt, False)

# All low order points and an index lookup to find P's subgroup by q * P
LO = [i * L for i in range(8)]
LO_index = [(i * pow(q, -1, 8)) % 8 for i in range(8)]


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, EdPoint) and P == val:
      return name
  for i, val in enumerate(LO):
    if P == val:
      return f"LO[{i}]"
  return f"EdPoint({P.x!r}, {P.y!r})"
