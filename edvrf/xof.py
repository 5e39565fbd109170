import hashlib


def shake256(data: bytes, size: int) -> bytes:
  """SHAKE256 extendable output of the requested size in bytes"""
  return hashlib.shake_256(data).digest(size)
