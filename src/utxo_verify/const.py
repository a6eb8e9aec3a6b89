ERRORS = {
  "E_TRUNCATED_INPUT": "UTXO input bytes truncated",
  "E_TYPE_MISMATCH": "Input type byte is not a UTXO input",
  "E_INDEX_OUT_OF_RANGE": "Transaction output index out of range",
  "E_MALFORMED_JSON": "UTXO input JSON invalid",
  "E_HEX_ENCODING": "Transaction ID hex encoding invalid",
  "E_STREAM_TOO_LARGE": "Input stream exceeds size limit",
}
