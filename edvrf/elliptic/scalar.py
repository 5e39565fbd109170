from __future__ import annotations

from functools import cached_property

# Field prime
p = 2**255 - 19

# Exponents for the Legendre symbol and for square roots (p = 5 mod 8)
p2 = (p - 1) // 2
p4 = (p - 1) // 4
p38 = (p + 3) // 8

# Order of the prime group of Ed25519 (called n or L in other sources)
q = 2**252 + 27742317777372353535851937790883648493


class fe:
  """An element of the prime field modulo p = 2^255 - 19"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, 'little')
  def bit(self, n: int) -> bool: return bool(self.val & 1 << n)

  def __eq__(self, other):
    # Comparing against ints or bytes is always a bug, so fail loudly
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p. Raises ValueError on division by zero."""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe:
    # pow raises ValueError for zero, which has no inverse
    return fe(pow(self.val, -1, p))

  @cached_property
  def is_negative(self) -> bool:
    """Sign as used by Elligator, the upper half of the field is negative."""
    return self.val > p2

  @cached_property
  def chi(self) -> fe:
    """Legendre symbol: zero, one for non-zero squares and minus1 otherwise"""
    return self**p2

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return fe(self.val * self.val)

  @cached_property
  def is_square(self) -> bool: return self.val == 0 or self.chi == one

  @cached_property
  def sqrt(self) -> fe:
    """The non-negative square root. Raises ValueError if there is none."""
    if not self.is_square: raise ValueError('Not a square!')
    # Candidate root, correct up to a factor of sqrt(-1)
    root = self**p38
    if root.sq != self: root *= sqrtm1
    return abs(root)


zero, one, minus1 = fe(0), fe(1), fe(-1)

# Square root of -1, needed by fe.sqrt and therefore computed without it
sqrtm1 = abs(fe(2)**p4)
assert sqrtm1 * sqrtm1 == minus1


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
