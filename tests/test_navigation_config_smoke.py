# Purpose: Smoke test to ensure every shipped navigation source is importable and callable.

import importlib

import pytest

from core.navigation_config import register_navigation


def test_core_register_navigation_callable():
    assert callable(register_navigation)


@pytest.mark.parametrize("module_name", ["auth", "settings", "billing"])
def test_module_register_navigation_callable(module_name):
    module = importlib.import_module(f"modules.{module_name}.navigation")
    assert callable(module.register_navigation)
