"""UTXO Core - UTXO input record, identifiers and codecs."""
from .codec import decode, encode
from .errors import (
    CodecError,
    InvalidHexEncoding,
    MalformedJSON,
    SlotIndexOutOfRange,
    TruncatedInput,
    TypeMismatch,
)
from .ids import derive_identifier, identifier_from_hex, identifier_to_hex, identifiers_to_hex
from .json_codec import dumps, from_json_obj, loads, to_json_obj
from .modes import DeSeriMode
from .utxo_input import UTXOInput

__all__ = [
    "UTXOInput",
    "DeSeriMode",
    "decode",
    "encode",
    "to_json_obj",
    "from_json_obj",
    "dumps",
    "loads",
    "derive_identifier",
    "identifier_to_hex",
    "identifiers_to_hex",
    "identifier_from_hex",
    "CodecError",
    "TruncatedInput",
    "TypeMismatch",
    "SlotIndexOutOfRange",
    "MalformedJSON",
    "InvalidHexEncoding",
]
