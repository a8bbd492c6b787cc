"""Contract value objects.

The engine only reads ``type`` from each transaction; payloads are
carried along for callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Transaction:
    """One embedded transaction of a contract."""

    type: int
    payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Contract:
    """An ordered list of transactions, optionally named."""

    transactions: tuple[Transaction, ...] = ()
    name: str | None = None

    @classmethod
    def of(cls, *types: int, name: str | None = None) -> Contract:
        """Build a contract from bare type codes."""
        return cls(tuple(Transaction(int(t)) for t in types), name=name)

    def __len__(self) -> int:
        return len(self.transactions)
