import sys

from tqdm import tqdm

from edvrf import batch
from edvrf.exceptions import CliArgError, VrfError
from edvrf.vrf import check, hash_to_curve, verify


def decode_hex(values):
  try:
    return [bytes.fromhex(v) for v in values]
  except (TypeError, ValueError):
    raise CliArgError("Arguments must be given in hex") from None


def main_verify(args):
  if args.files == [True]:
    values = sys.stdin.readline().split()
  else:
    values = args.files
  if len(values) != 4:
    raise CliArgError("Four values are needed: pk message vrf proof")
  pk, m, vrf, proof = decode_hex(values)
  if args.explain:
    try:
      check(pk, m, vrf, proof)
    except VrfError as e:
      raise ValueError(f"VRF proof verification failed: {e}")
  elif not verify(pk, m, vrf, proof):
    raise ValueError("VRF proof verification failed")
  sys.stderr.write(" ✅ VRF proof is valid\n")


def main_batch(args):
  try:
    workers = int(args.workers) if args.workers else None
  except ValueError:
    raise CliArgError(f"Invalid number of jobs: {args.workers}") from None
  if workers is not None and workers < 1:
    raise CliArgError("At least one job is needed")
  # Load all vectors first so that input errors are reported before any work
  sources = []
  for fname in args.files or [True]:
    if fname is True:
      sources.append(("<stdin>", batch.read_vectors(sys.stdin)))
      continue
    with open(fname, encoding="utf-8") as f:
      sources.append((fname, batch.read_vectors(f)))
  vectors = [v for _, vecs in sources for v in vecs]
  with tqdm(total=len(vectors), unit="proof", leave=False, disable=not sys.stderr.isatty()) as bar:
    results = iter(batch.verify_many(vectors, workers, progress=bar.update))
  failed = 0
  for name, vecs in sources:
    for i, _ in enumerate(vecs, 1):
      if not next(results):
        failed += 1
        sys.stderr.write(f" ❌ {name}: vector {i} rejected\n")
  if failed:
    raise ValueError(f"{failed} of {len(vectors)} VRF proofs rejected")
  sys.stderr.write(f" ✅ All {len(vectors)} VRF proofs are valid\n")


def main_hash(args):
  if len(args.files) != 1 or args.files[0] is True:
    raise CliArgError("One hex message is needed")
  m, = decode_hex(args.files)
  print(hash_to_curve(m))
