class VrfError(ValueError):
  """VRF proof could not be verified"""

class InputLengthInvalid(VrfError):
  """Public key, output or proof is not a byte string of the required size"""

class OutputMismatch(VrfError):
  """VRF output does not match the intermediate point of the proof"""

class PointDecodeFailed(VrfError):
  """Public key or intermediate point is not a valid prime group point"""

class ArithmeticDomainFault(VrfError):
  """Curve arithmetic failed on the given values"""

class ChallengeMismatch(VrfError):
  """Recomputed challenge scalar differs from the one in the proof"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
