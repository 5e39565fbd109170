from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Tuple

from edvrf.vrf import verify

# Default number of verification threads
BATCH_WORKERS = 4

Vector = Tuple[bytes, bytes, bytes, bytes]


def verify_many(items: Iterable[Vector], workers: int = None, progress: Optional[Callable] = None) -> List[bool]:
  """
  Verify (pk, m, vrf, proof) tuples concurrently, results in input order.

  :param progress: called with no arguments whenever a verification completes
  """
  def job(item):
    ok = verify(*item)
    if progress: progress()
    return ok

  with ThreadPoolExecutor(max_workers=workers or BATCH_WORKERS) as executor:
    return list(executor.map(job, items))


def read_vectors(lines: Iterable[str]) -> List[Vector]:
  """Parse lines of hex `pk m vrf proof`, ignoring blank lines and # comments."""
  vectors = []
  for i, line in enumerate(lines, 1):
    line = line.split("#", 1)[0].strip()
    if not line: continue
    fields = line.split()
    if len(fields) != 4:
      raise ValueError(f"Line {i}: expected four hex fields (pk m vrf proof) but found {len(fields)}")
    try:
      vectors.append(tuple(bytes.fromhex(f) for f in fields))
    except ValueError:
      raise ValueError(f"Line {i}: invalid hex encoding") from None
  return vectors
