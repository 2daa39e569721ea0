"""
Unit tests for pipeline_auth.config (environment-driven settings).
"""

import importlib


def reload_config():
    import pipeline_auth.config as config
    importlib.reload(config)
    return config


def test_defaults(monkeypatch):
    for name in ("BASICAUTH_REALM", "BASICAUTH_DEMO_USERS", "BASICAUTH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = reload_config()
    assert config.settings.REALM == "pipeline-auth"
    assert config.settings.DEMO_USERS == {"demo": "demo", "admin": "admin"}
    assert config.settings.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BASICAUTH_REALM", " staff ")
    monkeypatch.setenv("BASICAUTH_DEMO_USERS", "alice:s3:cret, bob:pw,,broken")
    monkeypatch.setenv("BASICAUTH_LOG_LEVEL", "debug")
    config = reload_config()
    assert config.settings.REALM == "staff"
    # split on the first colon only; entries without a colon are skipped
    assert config.settings.DEMO_USERS == {"alice": "s3:cret", "bob": "pw"}
    assert config.settings.LOG_LEVEL == "DEBUG"


def test_blank_realm_falls_back(monkeypatch):
    monkeypatch.setenv("BASICAUTH_REALM", "   ")
    config = reload_config()
    assert config.settings.REALM == "pipeline-auth"
