"""Wire constants for UTXO inputs.

Tag values, field widths, struct formats, output index bounds and JSON keys
used by the binary codec, the JSON adapter and the stream tools.
"""

# Input type tags
INPUT_UTXO = 0  # UTXO input, the only input kind handled here

# Field sizes
SMALL_TYPE_DENOTATION_BYTE_SIZE = 1
TRANSACTION_ID_LENGTH = 32
UINT16_BYTE_SIZE = 2
UINT16_MAX = 0xFFFF

# Record: [Type(1) | TransactionID(32) | OutputIndex(2, LE)] = 35 bytes
UTXO_INPUT_FMT = "<B32sH"
UTXO_INPUT_SIZE = SMALL_TYPE_DENOTATION_BYTE_SIZE + TRANSACTION_ID_LENGTH + UINT16_BYTE_SIZE

# Identifier: [TransactionID(32) | OutputIndex(2, LE)] = 34 bytes
UTXO_INPUT_ID_FMT = "<32sH"
UTXO_INPUT_ID_LENGTH = TRANSACTION_ID_LENGTH + UINT16_BYTE_SIZE

# Referenced output index bounds (inclusive)
REF_UTXO_INDEX_MIN = 0
REF_UTXO_INDEX_MAX = 126

# JSON field names
JSON_TYPE = "type"
JSON_TRANSACTION_ID = "transactionId"
JSON_TRANSACTION_OUTPUT_INDEX = "transactionOutputIndex"

# Default safety bounds
DEFAULT_MAX_STREAM_BYTES = 64 * 1024 * 1024  # 64 MiB per verified stream
