"""The UTXO input record."""
from __future__ import annotations

from dataclasses import dataclass

from .ids import derive_identifier, identifier_to_hex
from .protocol import TRANSACTION_ID_LENGTH, UINT16_MAX


@dataclass(frozen=True, order=True)
class UTXOInput:
    """References an unspent output by transaction id and output index.

    The index is only shape-checked here (it must fit the u16 wire field).
    The [0, 126] bounds are enforced by validating codec paths, so a freshly
    decoded or hand-built record may still hold an out-of-range index.
    """

    transaction_id: bytes
    transaction_output_index: int

    def __post_init__(self) -> None:
        tx_id = bytes(self.transaction_id)
        if len(tx_id) != TRANSACTION_ID_LENGTH:
            raise ValueError(
                f"transaction id must be {TRANSACTION_ID_LENGTH} bytes, got {len(tx_id)}"
            )
        object.__setattr__(self, "transaction_id", tx_id)

        idx = self.transaction_output_index
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise ValueError(f"transaction output index must be an int, got {type(idx).__name__}")
        if not 0 <= idx <= UINT16_MAX:
            raise ValueError(f"transaction output index {idx} does not fit in uint16")

    def id(self) -> bytes:
        return derive_identifier(self)

    def id_hex(self) -> str:
        return identifier_to_hex(self.id())
