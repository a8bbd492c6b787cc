"""Shared pytest fixtures and test helpers for symtax tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from symtax.config.settings import SymtaxSettings
from symtax.domain.bundles import SemanticsMap
from symtax.domain.semantics import optional_entry
from symtax.domain.sequence import TaxonomyMap, TaxonomyMapEntry
from symtax.domain.taxonomy import Taxonomy
from symtax.domain.types import TransactionType as T
from symtax.infrastructure.registry import TaxonomyRegistry

PROJECT_TOML = """\
[plugins]
enabled = false

[[taxonomies]]
name = "Tests.Mini"
entries = [
    { type = "MOSAIC_DEFINITION", required = false },
    { type = "TRANSFER", required = true },
]

[[taxonomies]]
name = "Tests.NamedAsset"
description = "Namespace, mosaic, supply, payouts, restriction"
entries = [
    { type = "NAMESPACE_REGISTRATION" },
    { type = "MOSAIC_DEFINITION" },
    { type = "MOSAIC_SUPPLY_CHANGE" },
    { type = "TRANSFER", required = false },
    { type = "ACCOUNT_ADDRESS_RESTRICTION" },
]

[[taxonomies.semantics]]
position = 3
kind = "optional"
"""


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SYMTAX_* environment out of the tests."""
    monkeypatch.delenv("SYMTAX_CONFIG", raising=False)
    monkeypatch.delenv("SYMTAX_VERBOSE", raising=False)
    monkeypatch.delenv("SYMTAX_QUIET", raising=False)
    monkeypatch.delenv("SYMTAX_JSON_OUTPUT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory holding a ``symtax.toml``."""
    (tmp_path / "symtax.toml").write_text(PROJECT_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def settings(project_root: Path) -> SymtaxSettings:
    return SymtaxSettings.from_cli(project_root=project_root, config_path=str(project_root / "symtax.toml"))


@pytest.fixture
def registry(settings: SymtaxSettings) -> TaxonomyRegistry:
    return TaxonomyRegistry.from_settings(settings)


@pytest.fixture
def named_asset() -> Taxonomy:
    """Five-position taxonomy with a repeatable optional TRANSFER at 3."""
    return Taxonomy(
        "Tests.NamedAsset",
        TaxonomyMap(
            [
                TaxonomyMapEntry(T.NAMESPACE_REGISTRATION, True),
                TaxonomyMapEntry(T.MOSAIC_DEFINITION, True),
                TaxonomyMapEntry(T.MOSAIC_SUPPLY_CHANGE, True),
                TaxonomyMapEntry(T.TRANSFER, False),
                TaxonomyMapEntry(T.ACCOUNT_ADDRESS_RESTRICTION, True),
            ]
        ),
        SemanticsMap({3: optional_entry()}),
    )


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def named_asset_types(transfers: int) -> list[int]:
    """Contract types for ``Tests.NamedAsset`` with *transfers* payouts."""
    return [
        T.NAMESPACE_REGISTRATION,
        T.MOSAIC_DEFINITION,
        T.MOSAIC_SUPPLY_CHANGE,
        *([T.TRANSFER] * transfers),
        T.ACCOUNT_ADDRESS_RESTRICTION,
    ]


def write_contract(directory: Path, name: str, transactions: list[Any], /, **extra: Any) -> Path:
    """Write a JSON contract file and return its path."""
    path = directory / f"{name}.json"
    body: Any = {"transactions": transactions, **extra} if extra else transactions
    path.write_text(json.dumps(body), encoding="utf-8")
    return path
