import pytest

from storefront_tests.ui_testing.framework import browser_manager
from storefront_tests.ui_testing.framework.browser_manager import BrowserManager


@pytest.fixture
def browser_config(monkeypatch):
    values = {}

    def fake_get_config(key, default=None):
        return values.get(key, default)

    monkeypatch.setattr(browser_manager, "get_config", fake_get_config)
    for name in ("HEADLESS", "BROWSER", "SLOWMO_MS", "KEEP_BROWSER_OPEN"):
        monkeypatch.delenv(name, raising=False)
    return values


def test_from_env_defaults(browser_config):
    manager = BrowserManager.from_env()

    assert manager.headless is True
    assert manager.browser_type == "chromium"
    assert manager.slow_mo_ms == 0
    assert manager.keep_open is False


def test_config_keys_apply_when_env_is_unset(browser_config):
    browser_config.update({
        "browser.keep_open": True,
        "browser.headless": "false",
        "browser.slowmo_ms": 120,
        "browser.name": "firefox",
    })

    manager = BrowserManager.from_env()

    assert manager.keep_open is True
    assert manager.headless is False
    assert manager.slow_mo_ms == 120
    assert manager.browser_type == "firefox"


def test_env_wins_over_config(browser_config, monkeypatch):
    browser_config["browser.keep_open"] = True
    monkeypatch.setenv("KEEP_BROWSER_OPEN", "0")
    monkeypatch.setenv("HEADLESS", "false")
    monkeypatch.setenv("SLOWMO_MS", "inf")

    manager = BrowserManager.from_env()

    assert manager.keep_open is False
    assert manager.headless is False
    assert manager.slow_mo_ms == 0


@pytest.mark.asyncio
async def test_keep_open_leaves_browser_running(browser_config):
    manager = BrowserManager(keep_open=True)
    manager._browser = object()

    await manager.close()

    assert manager.browser is not None
