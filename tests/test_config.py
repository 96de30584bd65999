import pytest

from scripts.config import (
    DEFAULT_LEVEL_SOURCES,
    DEFAULT_LEVELS_ROOT,
    DEFAULTS,
    level_sources,
    load_config,
    search_settings,
)


def test_missing_config_is_empty(tmp_path):
    assert load_config(str(tmp_path / "nope.yaml")) == {}
    assert search_settings({}) == DEFAULTS


def test_search_section_overrides_defaults(tmp_path):
    f = tmp_path / "search.yaml"
    f.write_text("search:\n  prune: box\n  node_limit: 10\n  unknown: 1\n", encoding="utf-8")
    cfg = search_settings(load_config(str(f)))
    assert cfg["prune"] == "box"
    assert cfg["node_limit"] == 10
    assert cfg["trace_every"] == 1024
    assert "unknown" not in cfg


def test_trace_every_must_be_positive():
    with pytest.raises(ValueError):
        search_settings({"search": {"trace_every": 0}})


def test_level_sources_default():
    assert level_sources({}) == (DEFAULT_LEVELS_ROOT, DEFAULT_LEVEL_SOURCES)
    assert level_sources({"levels": {"root_dir": "x", "sources": ["a"]}}) == ("x", ["a"])
