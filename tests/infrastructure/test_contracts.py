"""Tests for JSON contract loading."""

import json
from pathlib import Path

import pytest

from symtax.domain.contract import Transaction
from symtax.domain.types import TransactionType as T
from symtax.infrastructure.contracts import (
    ContractFormatError,
    load_contract,
    parse_contract,
    parse_transaction,
)


class TestParseTransaction:
    def test_bare_name(self) -> None:
        assert parse_transaction("TRANSFER", 0) == Transaction(T.TRANSFER)

    def test_bare_code(self) -> None:
        assert parse_transaction(16724, 0).type == T.TRANSFER

    def test_object_keeps_payload(self) -> None:
        tx = parse_transaction({"type": "TRANSFER", "recipient": "NALICE", "amount": 10}, 0)
        assert tx.type == T.TRANSFER
        assert tx.payload == {"recipient": "NALICE", "amount": 10}

    def test_object_without_type(self) -> None:
        with pytest.raises(ContractFormatError, match="#2 has no 'type'"):
            parse_transaction({"amount": 10}, 2)

    @pytest.mark.parametrize("value", [None, 1.5, True, ["TRANSFER"]])
    def test_invalid_type_value(self, value: object) -> None:
        with pytest.raises(ContractFormatError, match="invalid type"):
            parse_transaction({"type": value}, 0)

    def test_unknown_name(self) -> None:
        with pytest.raises(ContractFormatError, match="Unknown transaction type"):
            parse_transaction("NOT_A_TYPE", 4)


class TestParseContract:
    def test_list(self) -> None:
        contract = parse_contract(["MOSAIC_DEFINITION", "TRANSFER"], default_name="pair")
        assert [t.type for t in contract.transactions] == [T.MOSAIC_DEFINITION, T.TRANSFER]
        assert contract.name == "pair"

    def test_object_name_wins(self) -> None:
        contract = parse_contract({"name": "issuance", "transactions": []}, default_name="file")
        assert contract.name == "issuance"
        assert len(contract) == 0

    def test_object_without_transactions(self) -> None:
        with pytest.raises(ContractFormatError, match="no 'transactions'"):
            parse_contract({"name": "x"})

    def test_transactions_not_a_list(self) -> None:
        with pytest.raises(ContractFormatError, match="must be a list"):
            parse_contract({"transactions": "TRANSFER"})


class TestLoadContract:
    def test_file_stem_is_default_name(self, tmp_path: Path) -> None:
        path = tmp_path / "payout.json"
        path.write_text(json.dumps(["TRANSFER", {"type": "0x4154"}]), encoding="utf-8")
        contract = load_contract(path)
        assert contract.name == "payout"
        assert len(contract) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContractFormatError, match="Cannot read"):
            load_contract(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[TRANSFER", encoding="utf-8")
        with pytest.raises(ContractFormatError, match="Invalid JSON"):
            load_contract(path)
