import sys

from edvrf.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.workers = ""
    self.explain = None
    self.debug = None


verifyargs = dict(
  explain='-x --explain'.split(),
  debug='--debug'.split(),
)

batchargs = dict(
  workers='-j --jobs'.split(),
  debug='--debug'.split(),
)

hashargs = dict(debug='--debug'.split(),)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('verify', ): return 'verify', verifyargs
  if arg in ('batch', '-b'): return 'batch', batchargs
  if arg in ('hash', ): return 'hash', hashargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing due to argparse module's limitations
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (verify/batch/hash/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  for a in aiter:
    if not a.startswith('-'):
      args.files.append(a)
      continue
    if a == '-':
      args.files.append(True)
      continue
    if a == '--':
      args.files += aiter
      break
    argvar = next((k for k, v in ad.items() if a.lower() in v), None)
    if argvar is None:
      print_help(args.mode, f' 💣  Unknown argument: edvrf {args.mode} {a}')
    try:
      var = getattr(args, argvar)
      if isinstance(var, str):
        setattr(args, argvar, next(aiter))
      else:
        setattr(args, argvar, True)
    except StopIteration:
      print_help(args.mode, f' 💣  Argument parameter missing: edvrf {args.mode} {a} …')

  return args
