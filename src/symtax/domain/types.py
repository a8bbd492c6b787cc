"""Symbol transaction type codes.

Codes are the 16-bit entity types of the Symbol protocol. Taxonomies are
not restricted to this catalogue: any integer code may appear in a
template, the enum only provides names for the known ones.
"""

from __future__ import annotations

from enum import IntEnum


class TransactionType(IntEnum):
    """Known Symbol transaction types."""

    RESERVED = 0
    TRANSFER = 0x4154
    NAMESPACE_REGISTRATION = 0x414E
    ADDRESS_ALIAS = 0x424E
    MOSAIC_ALIAS = 0x434E
    MOSAIC_DEFINITION = 0x414D
    MOSAIC_SUPPLY_CHANGE = 0x424D
    MOSAIC_SUPPLY_REVOCATION = 0x434D
    MULTISIG_ACCOUNT_MODIFICATION = 0x4155
    AGGREGATE_COMPLETE = 0x4141
    AGGREGATE_BONDED = 0x4241
    HASH_LOCK = 0x4148
    SECRET_LOCK = 0x4152
    SECRET_PROOF = 0x4252
    ACCOUNT_ADDRESS_RESTRICTION = 0x4150
    ACCOUNT_MOSAIC_RESTRICTION = 0x4250
    ACCOUNT_OPERATION_RESTRICTION = 0x4350
    ACCOUNT_KEY_LINK = 0x414C
    MOSAIC_ADDRESS_RESTRICTION = 0x4251
    MOSAIC_GLOBAL_RESTRICTION = 0x4151
    ACCOUNT_METADATA = 0x4144
    MOSAIC_METADATA = 0x4244
    NAMESPACE_METADATA = 0x4344
    VRF_KEY_LINK = 0x4243
    VOTING_KEY_LINK = 0x4143
    NODE_KEY_LINK = 0x424C


def parse_transaction_type(value: int | str) -> int:
    """Resolve *value* to an integer transaction type code.

    Accepts an integer, a decimal or ``0x``-prefixed string, or a member
    name of :class:`TransactionType` (case-insensitive, ``-`` and ``_``
    interchangeable). Unknown integers are returned unchanged.
    """
    if isinstance(value, bool):
        msg = f"Not a transaction type: {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        return int(value)

    text = value.strip()
    if not text:
        msg = "Empty transaction type"
        raise ValueError(msg)
    try:
        return int(text, 0)
    except ValueError:
        pass

    key = text.upper().replace("-", "_")
    try:
        return int(TransactionType[key])
    except KeyError:
        msg = f"Unknown transaction type: {value!r}"
        raise ValueError(msg) from None


def type_name(code: int) -> str:
    """Return the member name for *code*, or its decimal form if unknown."""
    try:
        return TransactionType(code).name
    except ValueError:
        return str(code)
