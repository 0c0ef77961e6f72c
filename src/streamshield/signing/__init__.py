from .canonical import canonical_json, canonicalize
from .keycodec import decode_secret, encode_to_wire_alphabet
from .signer import Signer

__all__ = [
    "Signer",
    "canonical_json",
    "canonicalize",
    "decode_secret",
    "encode_to_wire_alphabet",
]
