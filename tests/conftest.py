"""Test fixtures for naat_search tests."""

import json
import os

# Set ENVIRONMENT before importing any modules that use core.config
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from naat_search.models import Naat
from naat_search.services.catalog import NaatCatalog


NAAT_DOCUMENTS = [
    {
        "$id": "n1",
        "title": "Hai Kalam e Ilah Mein Shamsudduha",
        "channelName": "Owais Raza Qadri",
        "channelId": "owais",
        "views": 1200,
    },
    {
        "$id": "n2",
        "title": "Kalam e Pak",
        "channelName": "Other Channel",
        "channelId": "other",
    },
    {
        "$id": "n3",
        "title": "Shamsudduha Ka Kalam",
        "channelName": "Owais Raza Qadri",
        "channelId": "owais",
    },
    {
        "$id": "n4",
        "title": "Hai Ilah Mein Kalam Shamsudduha",
        "channelName": "Owais Raza Qadri",
        "channelId": "owais",
    },
    {
        "$id": "n5",
        "title": "Beautiful Naat",
        "channelName": "Owais Raza Qadri",
        "channelId": "owais",
    },
]


@pytest.fixture
def naat_dicts():
    """Plain dict records, as a JSON API would return them."""
    return [
        {"title": doc["title"], "channelName": doc["channelName"]}
        for doc in NAAT_DOCUMENTS
    ]


@pytest.fixture
def naats():
    return [Naat.model_validate(doc) for doc in NAAT_DOCUMENTS]


@pytest.fixture
def catalog(naats):
    return NaatCatalog(naats)


@pytest.fixture
def catalog_file(tmp_path):
    """Write the sample documents as a catalogue export."""
    path = tmp_path / "naats.json"
    path.write_text(json.dumps(NAAT_DOCUMENTS), encoding="utf-8")
    return path
