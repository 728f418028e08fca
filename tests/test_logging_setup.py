from cardroster.config.settings import settings
from cardroster.logging.setup import sensitive_data_filter


def test_filter_masks_token_like_extra_values():
    record = {
        "message": "login",
        "extra": {"admin_token": "abcdefghijklmnop", "event": "Winter Open Teams"},
    }
    assert sensitive_data_filter(record) is True
    assert record["extra"]["admin_token"] == "abcd****mnop"
    assert record["extra"]["event"] == "Winter Open Teams"


def test_filter_masks_configured_storage_key(monkeypatch):
    monkeypatch.setattr(settings, "supabase_key", "super-secret-key")
    record = {"message": "using super-secret-key", "extra": {}}
    sensitive_data_filter(record)
    assert record["message"] == "using ********"
