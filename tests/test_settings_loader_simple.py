# Purpose: Simple tests for settings_loader to ensure safe defaults and module record parsing.

from core.settings_loader import (
    get_app_config,
    get_enabled_modules,
    get_module_statuses,
    get_navigation_settings,
    load_settings,
    reload_settings,
)


def test_load_settings_missing_file_returns_dict(settings_file):
    reload_settings()
    s = load_settings()
    assert s == {}
    assert get_app_config() == {}
    assert get_module_statuses() == {}


def test_missing_navigation_section_uses_defaults(settings_file):
    settings_file("app_config:\n  locale: fr\n")

    assert get_app_config() == {"locale": "fr"}
    assert get_navigation_settings() == {"default_group": "ungrouped", "default_order": 999}


def test_module_statuses_keep_file_order(settings_file):
    settings_file("modules:\n  Settings: true\n  Auth: false\n  Billing: 1\n")

    assert list(get_module_statuses()) == ["Settings", "Auth", "Billing"]
    assert get_enabled_modules() == ["Settings", "Billing"]


def test_invalid_modules_section_is_ignored(settings_file):
    settings_file("modules:\n  - Auth\n  - Settings\n")

    assert get_module_statuses() == {}


def test_malformed_yaml_returns_empty(settings_file):
    settings_file("modules: [unclosed\n")

    assert load_settings() == {}


def test_settings_reloaded_after_reload_settings(settings_file):
    settings_file("navigation:\n  default_group: misc\n")
    assert get_navigation_settings()["default_group"] == "misc"

    settings_file("navigation:\n  default_group: other\n")
    assert get_navigation_settings()["default_group"] == "other"
