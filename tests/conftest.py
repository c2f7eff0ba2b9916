"""Shared pytest fixtures for mushaf tests."""

import pytest

from factories import FakeProvider, make_detail, make_entry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep preferences and logs out of the real home directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("MUSHAF_CONFIG_DIR", str(config_dir))
    for name in (
        "MUSHAF_API_URL",
        "MUSHAF_API_TIMEOUT",
        "MUSHAF_API_RETRIES",
        "MUSHAF_DETAIL_CACHE_SIZE",
        "MUSHAF_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return config_dir


@pytest.fixture
def abc_entries():
    """The three-entry list used throughout the navigation scenarios."""
    return [
        make_entry(number=1, name="A"),
        make_entry(number=2, name="B"),
        make_entry(number=3, name="C"),
    ]


@pytest.fixture
def provider(abc_entries):
    return FakeProvider(
        abc_entries,
        [make_detail(number=1, name="A"), make_detail(number=2, name="B"), make_detail(number=3, name="C")],
    )
