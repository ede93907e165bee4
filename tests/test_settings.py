from phoneprep.core.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PHONEPREP_DEFAULT_REGION", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_region == "US"
    assert settings.log_level == "INFO"


def test_region_from_environment(monkeypatch):
    monkeypatch.setenv("PHONEPREP_DEFAULT_REGION", "GB")
    assert get_settings().default_region == "GB"


def test_settings_cached():
    assert get_settings() is get_settings()
