# SPDX-License-Identifier: MIT
"""Tests for ccconfig.configure.loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ccconfig.configure.loader import (
    ProductOverrideStore,
    load_ae_flag,
    load_product_overrides,
)
from ccconfig.configure.schema import OverrideBlock
from ccconfig.core.errors import ConfigReadError, MalformedConfigError


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data))
    return path


class TestLoadAEFlag:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_ae_flag(tmp_path / "ae.json") == ""

    def test_no_path(self) -> None:
        assert load_ae_flag(None) == ""

    def test_reads_flag(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "ae.json", {"SDCLANG_AE_FLAG": "-fsafe"})
        assert load_ae_flag(path) == "-fsafe"

    def test_missing_key(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "ae.json", {"OTHER": "x"})
        assert load_ae_flag(path) == ""

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "ae.json"
        path.write_text("{not json")
        with pytest.raises(MalformedConfigError) as exc_info:
            load_ae_flag(path)
        assert exc_info.value.source == path
        assert "Invalid JSON" in exc_info.value.detail

    def test_wrong_type(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "ae.json", {"SDCLANG_AE_FLAG": 42})
        with pytest.raises(MalformedConfigError) as exc_info:
            load_ae_flag(path)
        assert "SDCLANG_AE_FLAG" in exc_info.value.detail

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigReadError):
            load_ae_flag(tmp_path)


class TestLoadProductOverrides:
    def test_missing_file(self, tmp_path: Path) -> None:
        store = load_product_overrides(tmp_path / "sdclang.json")
        assert len(store) == 0
        assert store.source is None

    def test_loads_products(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "sdclang.json",
            {
                "alpha": {"SDCLANG": True, "SDCLANG_PATH": "/vendor/tc"},
                "beta": {"SDCLANG": False},
            },
        )
        store = load_product_overrides(path)
        assert sorted(store) == ["alpha", "beta"]
        assert store.source == path
        assert store["alpha"].path == "/vendor/tc"

    def test_empty_file_is_malformed(self, tmp_path: Path) -> None:
        path = tmp_path / "sdclang.json"
        path.write_text("")
        with pytest.raises(MalformedConfigError):
            load_product_overrides(path)

    def test_top_level_array_is_malformed(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "sdclang.json", ["alpha"])
        with pytest.raises(MalformedConfigError):
            load_product_overrides(path)

    def test_other_products_not_inspected(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "sdclang.json",
            {
                "alpha": {"SDCLANG": True, "SDCLANG_PATH": "/vendor/tc"},
                "broken": {"SDCLANG": "yes"},
                "scalar": 7,
            },
        )
        store = load_product_overrides(path)
        assert store.lookup("alpha").is_enabled
        assert "broken" in store

    def test_malformed_block_raises_on_lookup(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "sdclang.json", {"alpha": {"SDCLANG": "yes"}})
        store = load_product_overrides(path)
        with pytest.raises(MalformedConfigError) as exc_info:
            store.lookup("alpha")
        assert "alpha" in exc_info.value.detail
        assert "SDCLANG" in exc_info.value.detail
        assert str(path) in str(exc_info.value)


class TestProductOverrideStore:
    def test_lookup_missing_product(self) -> None:
        store = ProductOverrideStore({"alpha": {"SDCLANG": True}})
        block = store.lookup("beta")
        assert block == OverrideBlock()
        assert not block.is_enabled

    def test_lookup_is_case_sensitive(self) -> None:
        store = ProductOverrideStore({"Alpha": {"SDCLANG": True}})
        assert not store.lookup("alpha").is_enabled
        assert store.lookup("Alpha").is_enabled

    def test_non_object_block(self) -> None:
        store = ProductOverrideStore({"alpha": "on"})
        with pytest.raises(MalformedConfigError):
            store.lookup("alpha")

    def test_getitem_missing_raises_key_error(self) -> None:
        store = ProductOverrideStore()
        with pytest.raises(KeyError):
            store["alpha"]

    def test_not_affected_by_source_mutation(self) -> None:
        products = {"alpha": {"SDCLANG": True}}
        store = ProductOverrideStore(products)
        products["beta"] = {"SDCLANG": True}
        assert "beta" not in store
