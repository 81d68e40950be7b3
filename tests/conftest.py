"""Shared fixtures for record-store tests."""

from collections.abc import Generator
import pathlib

import pytest

from record_store.store import StoreRegistry, adapter, registry



@pytest.fixture
def testdata() -> pathlib.Path:
    """Path to the directory of test data files."""
    return pathlib.Path(__file__).parent / "testdata"


@pytest.fixture
def fresh_registry(monkeypatch: pytest.MonkeyPatch) -> Generator[StoreRegistry, None, None]:
    """Replace the process wide registry so each test starts empty."""
    reg = StoreRegistry()
    monkeypatch.setattr(registry, "REGISTRY", reg)
    monkeypatch.setattr(adapter, "REGISTRY", reg)
    yield reg
