"""Ed25519 VRF proof verification (SHAKE256 and Elligator 2 hashing)"""

from edvrf.vrf import PROOF_SIZE, PUBLIC_KEY_SIZE, VRF_SIZE, check, hash_to_curve, verify

__version__ = "0.1.0"
