import importlib
import logging

import src.api.main as main_mod
import src.utils.config_loader as config_loader


def test_logging_is_configured_before_settings_are_loaded(monkeypatch):
    calls = []
    real_load = config_loader.load_settings

    def fake_basic_config(**kwargs):
        calls.append(("basicConfig", kwargs.get("level")))

    def recording_load(env=None):
        calls.append(("load_settings", None))
        return real_load(env={})

    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    monkeypatch.setattr(config_loader, "load_settings", recording_load)

    importlib.reload(main_mod)

    assert calls[0] == ("basicConfig", "DEBUG")
    assert ("load_settings", None) in calls[1:]
