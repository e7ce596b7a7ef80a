"""
Test configuration and fixtures for the avatar generator.

Provides the bundled catalog, editable copies of its raw data for degraded
catalog tests, and the stored regression document.
"""

import copy
import os
import sys
from pathlib import Path

import pytest
import yaml

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from multiavatar.avatar.catalog import DEFAULT_CATALOG_PATH, get_catalog

FIXTURES = Path(__file__).parent / "fixtures"

BINX = "Binx Bond123"


@pytest.fixture(scope="session")
def catalog():
    """The catalog bundled with the package"""
    return get_catalog()


@pytest.fixture(scope="session")
def _raw_catalog():
    return yaml.safe_load(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def raw_catalog(_raw_catalog):
    """A private, editable copy of the bundled catalog data"""
    return copy.deepcopy(_raw_catalog)


@pytest.fixture(scope="session")
def binx_svg():
    """Regression document for "Binx Bond123" with no options"""
    return (FIXTURES / "binx_bond123.svg").read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep a developer's MULTIAVATAR_* environment out of the tests"""
    for key in list(os.environ):
        if key.startswith("MULTIAVATAR_"):
            monkeypatch.delenv(key, raising=False)


def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line(
        "markers", "regression: compares output against stored fixture documents"
    )
