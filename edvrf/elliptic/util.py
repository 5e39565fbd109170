from typing import Tuple

from .scalar import q

# All integers on the wire are little endian, least significant byte first.


def toint(x) -> int:
  if isinstance(x, int): return x
  if len(x) != 32: raise ValueError("Should be exactly 32 bytes")
  return int.from_bytes(x, "little")

def tointsign(x) -> Tuple[int, bool]:
  """Separate the 255 bit integer and its high bit as a sign, return both."""
  val = toint(x)
  sign = val & 1 << 255
  return val ^ sign, bool(sign)

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")

def toscalar(x) -> int:
  """Decode a little endian scalar of any length, reduced mod q."""
  if isinstance(x, int): return x % q
  # Same as reading the reversed bytes as a big endian number
  return int.from_bytes(x, "little") % q
