# A plain Python submodule for Ed25519 math and Elligator 2

# Based on the elliptic curve code of Covert and Monocypher (public domain)
# https://github.com/LoupVaillant/Monocypher/blob/master/tests/gen/elligator.py
# and on the Ed25519 RFC https://datatracker.ietf.org/doc/html/rfc8032

# Not constant time. Only suitable for public values such as public keys,
# proofs and messages, never for secret scalars.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are scalars (int or fe), upper case are EdPoints.

from . import mont
from .ed import LO, ZERO, EdPoint, G, L
from .elligator import elligator2, hash_to_edwards
from .scalar import fe, minus1, one, p, q, sqrtm1, zero
from .util import tobytes, toint, tointsign, toscalar
