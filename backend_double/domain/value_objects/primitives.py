"""Primitive chain identifiers.

Hashes and addresses are kept as 0x-prefixed hex strings so they can be
written directly in YAML presets. Numeric identifiers are NewTypes over int.
"""

from typing import NewType

Hash = NewType("Hash", str)
Address = NewType("Address", str)
EventHash = NewType("EventHash", str)

BlockNumber = NewType("BlockNumber", int)
BlockIndex = NewType("BlockIndex", int)
Epoch = NewType("Epoch", int)
EventIndex = NewType("EventIndex", int)
StakerID = NewType("StakerID", int)
Timestamp = NewType("Timestamp", int)  # nanoseconds since epoch

# Special block numbers accepted by RPC queries
LATEST_BLOCK = BlockNumber(-1)
PENDING_BLOCK = BlockNumber(-2)

HASH_LENGTH = 32
ADDRESS_LENGTH = 20


def _left_aligned_hex(first_byte: int, length: int) -> str:
    if not 0 <= first_byte <= 0xFF:
        raise ValueError(f"First byte must be 0-255, got {first_byte}")
    return "0x" + f"{first_byte:02x}" + "00" * (length - 1)


def to_hash(first_byte: int = 0) -> Hash:
    """Build a 32-byte hash whose first byte is ``first_byte``.

    Example:
        >>> to_hash(2)[:6]
        '0x0200'
    """
    return Hash(_left_aligned_hex(first_byte, HASH_LENGTH))


def to_address(first_byte: int = 0) -> Address:
    """Build a 20-byte address whose first byte is ``first_byte``."""
    return Address(_left_aligned_hex(first_byte, ADDRESS_LENGTH))


def to_event_hash(value: int) -> EventHash:
    """Build an event hash from an integer, right-aligned like a hex literal.

    Example:
        >>> to_event_hash(1)[-2:]
        '01'
    """
    return EventHash(f"0x{value:0{HASH_LENGTH * 2}x}")


ZERO_HASH = to_hash(0)
ZERO_ADDRESS = to_address(0)
