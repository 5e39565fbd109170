import sys
from typing import NoReturn

import edvrf

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  verify=f"{C}edvrf {F}verify {D}[{F}-x{D}]{N} pk message vrf proof {D}|{N} {F}-{N}\n",
  batch=f"{C}edvrf {F}batch {D}[{F}-j {N}4{D}] [{N}vectors.txt{D}]…{N}\n",
  hash=f"{C}edvrf {F}hash {N}message {D}—{N} map a message onto the curve\n",
)

usagetext = dict(
  verify=f"""\
Verify a single VRF proof. All values are given in hex: the 32-byte Ed25519
public key, the message, the 32-byte VRF output and the 96-byte proof. With
{F}-{N} the four values are read from one line of standard input.

  {F}-x --explain{N}      Tell which check failed (for debugging only)

Exits with status 0 when the proof is valid and 10 when it is not.
""",
  batch=f"""\
Verify many proofs concurrently. Each line of the input files has the four
hex values {N}pk message vrf proof{N} separated by whitespace. Empty lines and
anything after {F}#{N} are ignored. Without files, or with {F}-{N}, standard input is read.

  {F}-j --jobs{N} N       Number of verification threads (default 4)

Rejected vectors are listed by file and line. Exits with status 0 only if
all proofs are valid.
""",
  hash=f"""\
Hash a hex message onto the prime order group of Ed25519 (SHAKE256, Elligator
2 and cofactor clearing) and print the compressed point in hex.
""",
)

introduction = f"""\
{T}                    Ed25519 VRF proof verification                     {N}
"""

shorthelp = f"""\
{introduction}
{usage['verify']}{usage['batch']}{usage['hash']}
Use {C}edvrf {F}help{N} for more information.
"""

allcommands = "".join(f"{usage[mode]}{usagetext[mode]}\n" for mode in usage)

cmdhelp = {mode: f"{usage[mode]}\n{usagetext[mode]}" for mode in usage}

fullhelp = f"""\
{introduction}
{allcommands}\
{H}Other options:{N}

  {F}--debug{N}           Show a full traceback on errors
  {F}-v --version{N}      Show version and exit
"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"edvrf {edvrf.__version__}")
  sys.exit(0)
