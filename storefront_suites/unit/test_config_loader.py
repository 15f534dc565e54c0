import pytest
import yaml

from storefront_suites.ui_testing.framework.browser_manager import BrowserManager
from storefront_suites.ui_testing.framework.config_loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    ConfigurationError,
    UISettings,
    get_ui_settings,
)
from storefront_suites.ui_testing.framework.selectors import SelectorKind


def write_config(path, data):
    path.write_text(yaml.dump(data), encoding="utf-8")
    return path


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = write_config(
        tmp_path / "config.yaml",
        {"ui": {"base_url": "https://shop.example.com/", "timeouts": {"default": 5000}}},
    )

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.base_url") == "https://shop.example.com/"
    assert loader.get("ui.timeouts.login", 15000) == 15000

    ConfigLoader.reset()
    monkeypatch.setenv("UI_BASE_URL", "https://env.example.com/")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.base_url") == "https://env.example.com/"


def test_env_values_converted_to_default_type(monkeypatch, tmp_path):
    loader = ConfigLoader(config_path=write_config(tmp_path / "config.yaml", {}))
    monkeypatch.setenv("UI_HEADLESS", "false")
    monkeypatch.setenv("UI_TIMEOUTS_DEFAULT", "2500")
    monkeypatch.setenv("UI_TIMEOUTS_POLL_INTERVAL", "fast")

    assert loader.get("ui.headless", True) is False
    assert loader.get("ui.timeouts.default", 10000) == 2500
    assert loader.get("ui.timeouts.poll_interval", 100) == "fast"


def test_reload_updates_values(tmp_path):
    config_path = write_config(tmp_path / "config.yaml", {"ui": {"browser": "chromium"}})

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.browser") == "chromium"

    write_config(config_path, {"ui": {"browser": "firefox"}})
    loader.reload()
    assert loader.get("ui.browser") == "firefox"


def test_loader_is_a_singleton(tmp_path):
    first = ConfigLoader(config_path=write_config(tmp_path / "a.yaml", {"ui": {"browser": "webkit"}}))
    second = ConfigLoader(config_path=tmp_path / "ignored.yaml")

    assert first is second
    assert second.get("ui.browser") == "webkit"


def test_missing_file_falls_back_to_defaults(tmp_path):
    loader = ConfigLoader(config_path=tmp_path / "missing.yaml")

    assert loader.get("ui.timeouts.cart_clear", 60000) == 60000
    assert loader.get("ui.browser") is None


def test_invalid_yaml_raises(tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("ui: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        ConfigLoader(config_path=config_path)


def test_ui_settings_from_config(tmp_path, monkeypatch):
    for name in ("UI_BASE_URL", "UI_BROWSER", "UI_SELECTOR_DIALECT", "UI_TIMEOUTS_LOGIN"):
        monkeypatch.delenv(name, raising=False)
    config_path = write_config(tmp_path / "config.yaml", {
        "ui": {
            "browser": "firefox",
            "selector_dialect": "structural",
            "timeouts": {"default": 2000, "cart_clear": 9000, "poll_interval": 50},
        },
    })

    settings = UISettings.from_config(ConfigLoader(config_path=config_path))

    assert settings.browser == "firefox"
    assert settings.selector_dialect is SelectorKind.STRUCTURAL
    assert settings.default_timeout == 2000
    assert settings.cart_clear_timeout == 9000
    assert settings.poll_interval == 50
    assert settings.login_timeout == UISettings().login_timeout
    assert settings.base_url == "https://www.demoblaze.com/"


def test_shipped_configuration(monkeypatch):
    for name in ("UI_BASE_URL", "UI_SELECTOR_DIALECT", "UI_HEADLESS", "UI_BROWSER"):
        monkeypatch.delenv(name, raising=False)

    assert DEFAULT_CONFIG_PATH.exists()
    settings = get_ui_settings()

    assert settings.base_url == "https://www.demoblaze.com/"
    assert settings.selector_dialect is SelectorKind.SHORT
    assert settings.headless is True


def test_browser_manager_takes_browser_and_headless_from_settings():
    manager = BrowserManager(settings=UISettings(browser="Firefox", headless=False))

    assert manager.browser_type == "firefox"
    assert manager.headless is False
    assert BrowserManager(headless=True, settings=UISettings()).headless is True


def test_browser_manager_rejects_unknown_browser():
    with pytest.raises(ValueError, match="Unsupported browser 'opera'"):
        BrowserManager(browser_type="opera", settings=UISettings())
