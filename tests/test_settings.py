from cardroster.config.settings import AppSettings, load_settings


def test_defaults_without_environment(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_KEY", raising=False)
    settings = AppSettings(_env_file=None)
    assert settings.storage_bucket == "system-cards-01"
    assert settings.tournaments_config_key == "config/tournaments.json"
    assert settings.default_tournament == "26prague"
    assert not settings.storage_configured


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "secret-key")
    monkeypatch.setenv("DEFAULT_TOURNAMENT", "26youthonline")
    settings = AppSettings(_env_file=None)
    assert settings.storage_configured
    assert settings.default_tournament == "26youthonline"


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"
