"""Contract file loading.

A contract file is JSON, either a bare list of transactions or an
object with a ``transactions`` list and an optional ``name``. Each
transaction is a type (integer or name) or an object with a ``type``
field; any other fields are kept as the transaction payload.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from symtax.domain.contract import Contract, Transaction
from symtax.domain.types import parse_transaction_type


class ContractFormatError(ValueError):
    """Raised when a contract file cannot be read or interpreted."""


def parse_transaction(raw: Any, index: int) -> Transaction:
    """Build a :class:`Transaction` from one decoded JSON item."""
    if isinstance(raw, dict):
        if "type" not in raw:
            msg = f"Transaction #{index} has no 'type' field"
            raise ContractFormatError(msg)
        payload = {k: v for k, v in raw.items() if k != "type"}
        value = raw["type"]
    else:
        payload = {}
        value = raw

    if not isinstance(value, (int, str)) or isinstance(value, bool):
        msg = f"Transaction #{index} has an invalid type: {value!r}"
        raise ContractFormatError(msg)
    try:
        return Transaction(parse_transaction_type(value), payload)
    except ValueError as exc:
        msg = f"Transaction #{index}: {exc}"
        raise ContractFormatError(msg) from exc


def parse_contract(data: Any, *, default_name: str | None = None) -> Contract:
    """Build a :class:`Contract` from decoded JSON data."""
    name = default_name
    if isinstance(data, dict):
        if "transactions" not in data:
            msg = "Contract object has no 'transactions' list"
            raise ContractFormatError(msg)
        name = str(data.get("name") or default_name or "") or None
        items = data["transactions"]
    else:
        items = data

    if not isinstance(items, list):
        msg = "Contract transactions must be a list"
        raise ContractFormatError(msg)
    return Contract(tuple(parse_transaction(raw, i) for i, raw in enumerate(items)), name=name)


def load_contract(path: Path) -> Contract:
    """Read and parse the contract file at *path*.

    The file stem is used as the contract name unless the file sets one.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read contract file {path}: {exc.strerror or exc}"
        raise ContractFormatError(msg) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise ContractFormatError(msg) from exc
    return parse_contract(data, default_name=path.stem)
