"""
Pytest configuration and fixtures.
"""

import copy
import json
import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("CAMUS_ENVIRONMENT", "development")


FULL_DOCUMENT = {
    "listenAddress": "0.0.0.0:8080",
    "publicUrl": "https://camus.example.com",
    "listenPort": 8080,
    "serverReadTimeoutSecs": 20,
    "serverWriteTimeoutSecs": 45,
    "corsAllowedOrigins": ["https://kontext.example.com"],
    "timeZone": "Europe/Prague",
    "authHeaderName": "X-Api-Key",
    "authTokens": ["token-a", "token-b"],
    "logging": {"path": "", "level": "info"},
    "redis": {
        "host": "redis.local",
        "port": 6379,
        "db": 2,
        "password": "",
        "queueKey": "camus_queue",
        "failedQueueKey": "camus_queue_failed",
        "failedRecordsKey": "camus_queue_failed_records",
    },
    "db": {
        "host": "mariadb.local:3307",
        "user": "camus",
        "passwd": "secret",
        "name": "kontext",
        "poolSize": 10,
    },
    "archiver": {
        "ddStateFilePath": "/var/lib/camus/dedup.json",
        "checkIntervalSecs": 30,
        "checkIntervalChunk": 50,
        "preloadLastNItems": 1000,
    },
    "indexer": {
        "indexDirPath": "/var/lib/camus/index",
        "docRemoveChannel": "camus_doc_remove",
        "queryHistoryNumPreserve": 500,
    },
    "cleaner": {
        "checkIntervalSecs": 600,
        "numProcessItemsPerTurn": 20,
        "minAgeDaysUnvisited": 180,
        "statusKey": "camus_cleanup_status",
    },
    "reporting": {
        "host": "timescale.local",
        "port": 5432,
        "user": "reporter",
        "passwd": "secret",
        "db": "metrics",
        "sslMode": "disable",
    },
}


MINIMAL_DOCUMENT = {
    "listenAddress": "0.0.0.0:8080",
    "listenPort": 8080,
    "logging": {},
    "redis": {"queueKey": "camus_queue"},
    "db": {},
    "archiver": {"ddStateFilePath": "/var/lib/camus/dedup.json"},
    "indexer": {"indexDirPath": "/var/lib/camus/index"},
    "reporting": {},
}


@pytest.fixture
def full_document() -> dict:
    """A document with every optional value set."""
    return copy.deepcopy(FULL_DOCUMENT)


@pytest.fixture
def minimal_document() -> dict:
    """A document with only the required values set."""
    return copy.deepcopy(MINIMAL_DOCUMENT)


@pytest.fixture
def write_config(tmp_path):
    """Write a document (dict or raw text) to a file and return its path."""

    def _write(document, name: str = "conf.json") -> str:
        path = tmp_path / name
        if isinstance(document, dict):
            document = json.dumps(document)
        path.write_text(document, encoding="utf-8")
        return str(path)

    return _write
