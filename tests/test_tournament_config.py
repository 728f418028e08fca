import asyncio
import json

from cardroster.models.enums import RosterMode
from cardroster.storage.tournament_config import (
    default_tournament_config,
    load_tournament_config,
)


class FakeBucket:
    def __init__(self, objects):
        self.objects = objects

    async def download(self, key):
        if key not in self.objects:
            raise FileNotFoundError(key)
        return self.objects[key]


class FakeStorage:
    def __init__(self, objects):
        self.bucket = FakeBucket(objects)
        self.bucket_names = []

    def from_(self, bucket_name):
        self.bucket_names.append(bucket_name)
        return self.bucket


class FakeClient:
    def __init__(self, objects):
        self.storage = FakeStorage(objects)


def test_default_config_knows_prague_sources():
    config = default_tournament_config()
    assert config.source_url("26prague", RosterMode.TEAMS).endswith(
        "displayteamsparticipanalytical.asp"
    )
    assert config.source_url("26prague", RosterMode.PAIRS).endswith(
        "displaypairsparticip.asp"
    )
    assert config.source_url("womenonline26", RosterMode.PAIRS) is None
    assert config.source_url("unknown", RosterMode.TEAMS) is None


def test_load_without_client_uses_defaults():
    config = asyncio.run(load_tournament_config(None))
    assert config == default_tournament_config()


def test_load_reads_config_object():
    body = json.dumps(
        {
            "tournaments": {
                "27rome": {"teamsUrl": "https://example.org/teams.asp", "pairsUrl": ""},
            }
        }
    ).encode("utf-8")
    client = FakeClient({"config/tournaments.json": body})

    config = asyncio.run(load_tournament_config(client))

    assert client.storage.bucket_names == ["system-cards-01"]
    assert config.source_url("27rome", RosterMode.TEAMS) == "https://example.org/teams.asp"
    assert config.source_url("27rome", RosterMode.PAIRS) is None
    assert config.source_url("26prague", RosterMode.TEAMS) is None


def test_load_falls_back_when_object_missing():
    config = asyncio.run(load_tournament_config(FakeClient({})))
    assert config == default_tournament_config()


def test_load_falls_back_on_invalid_json():
    client = FakeClient({"config/tournaments.json": b"{not json"})
    config = asyncio.run(load_tournament_config(client))
    assert config == default_tournament_config()
