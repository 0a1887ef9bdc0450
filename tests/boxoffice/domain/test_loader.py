"""Tests for loading catalogue data from the seed and from JSON files."""

import json
from datetime import UTC, datetime

import pytest
from boxoffice.catalog.loader import CATALOG_FILE_ENV, default_catalog, load_catalog, load_catalog_file
from boxoffice.catalog.seed import seed_data
from boxoffice.exceptions import ConfigError


class TestLoadCatalog:
    def test_seed_dates_are_relative_to_now(self):
        now = datetime(2026, 1, 1, tzinfo=UTC)
        index = load_catalog(seed_data(now=now))
        assert index.by_id("concert", "c1").date.date().isoformat() == "2026-01-08"

    def test_standalone_concert_has_no_group(self, catalog):
        assert not catalog.by_id("concert", "c2").group_id

    def test_missing_field(self):
        data = seed_data()
        del data["venues"][0]["name"]
        with pytest.raises(ConfigError) as exc:
            load_catalog(data)
        assert "'name'" in str(exc.value)

    def test_negative_inventory(self):
        data = seed_data()
        data["ticketCategories"][0]["inventory"] = -1
        with pytest.raises(ConfigError):
            load_catalog(data)

    def test_negative_price(self):
        data = seed_data()
        data["ticketCategories"][0]["price"] = -10
        with pytest.raises(ConfigError):
            load_catalog(data)

    def test_bad_date(self):
        data = seed_data()
        data["concerts"][0]["date"] = "next tuesday"
        with pytest.raises(ConfigError):
            load_catalog(data)

    def test_empty_catalog(self):
        index = load_catalog({})
        assert index.concerts() == []


class TestLoadCatalogFile:
    def test_load_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(seed_data()), encoding="utf-8")
        index = load_catalog_file(path)
        assert index.category("tc1").inventory == 25

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_catalog_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_catalog_file(path)


class TestDefaultCatalog:
    def test_falls_back_to_seed(self, monkeypatch):
        monkeypatch.delenv(CATALOG_FILE_ENV, raising=False)
        assert len(default_catalog().concerts()) == 3

    def test_reads_file_from_environment(self, monkeypatch, tmp_path):
        data = seed_data()
        data["concerts"] = data["concerts"][:1]
        data["ticketCategories"] = data["ticketCategories"][:3]
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        monkeypatch.setenv(CATALOG_FILE_ENV, str(path))

        assert [str(c.id) for c in default_catalog().concerts()] == ["c1"]
