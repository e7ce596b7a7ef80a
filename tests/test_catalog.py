# tests/test_catalog.py
import logging

import pytest
import yaml

from multiavatar.avatar.catalog import (
    DEFAULT_CATALOG_PATH,
    Catalog,
    CatalogError,
    get_catalog,
    load_catalog,
)
from multiavatar.avatar.render import find_placeholders
from multiavatar.avatar.sdk import PART_NAMES, THEMES, VERSIONS


def test_bundled_catalog_is_complete(catalog):
    assert catalog.missing() == []
    assert len(catalog) == len(VERSIONS) * len(THEMES) * len(PART_NAMES)


def test_bundled_color_lists_cover_every_slot(catalog):
    for version in VERSIONS:
        for part in PART_NAMES:
            slots = len(find_placeholders(catalog.fragment(version, part)))
            assert slots > 0, f"{version}/{part} has no color slots"
            for theme in THEMES:
                colors = catalog.colors(version, theme, part)
                assert len(colors) >= slots, f"{version}{theme}/{part}"


def test_lookups_return_none_when_absent(catalog):
    assert catalog.fragment("16", "eyes") is None
    assert catalog.colors("00", "D", "eyes") is None
    assert catalog.colors("00", "A", "nose") is None


def test_colors_are_read_only(catalog):
    colors = catalog.colors("05", "B", "env")
    assert isinstance(colors, tuple)
    with pytest.raises(TypeError):
        catalog._colors[("05", "B", "env")] = ("#000000",)


def test_get_catalog_is_cached():
    assert get_catalog() is get_catalog()
    assert get_catalog(DEFAULT_CATALOG_PATH) is get_catalog()


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.yaml")


def test_load_catalog_unparsable_file(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("fragments: [unclosed\n", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(p)


def test_load_catalog_not_a_mapping(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(p)


@pytest.mark.parametrize(
    "raw",
    [
        {"fragments": {}},
        {"fragments": {"16": {"env": "<g/>"}}, "themes": {}},
        {"fragments": {"00": {"nose": "<g/>"}}, "themes": {}},
        {"fragments": {}, "themes": {"00": {"D": {"env": ["#fff"]}}}},
        {"fragments": {}, "themes": {"00": {"A": {"hat": ["#fff"]}}}},
    ],
)
def test_from_dict_rejects_malformed_catalogs(raw):
    with pytest.raises(CatalogError):
        Catalog.from_dict(raw)


def test_from_dict_accepts_partial_catalog():
    catalog = Catalog.from_dict(
        {
            "fragments": {"00": {"env": '<circle style="fill:#01;"/>'}},
            "themes": {"00": {"A": {"env": ["#123456"]}}},
        },
        source="inline",
    )
    assert catalog.source == "inline"
    assert catalog.fragment("00", "env") == '<circle style="fill:#01;"/>'
    assert catalog.colors("00", "A", "env") == ("#123456",)
    assert "fragment 00/clo" in catalog.missing()
    assert "colors 00B/env" in catalog.missing()


def test_load_incomplete_catalog_warns(raw_catalog, tmp_path, monkeypatch, caplog):
    del raw_catalog["themes"]["02"]["C"]["head"]
    p = tmp_path / "catalog.yaml"
    p.write_text(yaml.safe_dump(raw_catalog), encoding="utf-8")

    monkeypatch.setattr(logging.getLogger("multiavatar"), "propagate", True)
    with caplog.at_level(logging.WARNING, logger="multiavatar"):
        catalog = load_catalog(p)

    assert catalog.missing() == ["colors 02C/head"]
    assert "incomplete" in caplog.text
