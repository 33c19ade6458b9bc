"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults so a fresh clone runs against the public SauceDemo site
  - Configure the shared Loguru sink once per session
  - Keep live-site suites (e2e, bdd) opt-in: `--run-e2e` or `RUN_E2E=1`
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from storefront_tools.common import env_flag, init_logger


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run e2e and bdd tests against the live site (same as RUN_E2E=1)",
    )


def pytest_sessionstart(session):
    init_logger()


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e") or env_flag("RUN_E2E"):
        return

    skip_live = pytest.mark.skip(reason="live-site test: pass --run-e2e or set RUN_E2E=1")
    for item in items:
        if item.get_closest_marker("e2e") or item.get_closest_marker("bdd"):
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.

    SauceDemo credentials are public; they live in the YAML data sets, not here.
    """
    defaults = {
        "UI_BASE_URL": "https://www.saucedemo.com",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
