"""
Root conftest.py — Shared fixtures for all tests.
"""

import json

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no process environment access")
    config.addinivalue_line("markers", "integration: tests that go through os.environ")


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

@pytest.fixture
def credentials():
    """Canonical credentials as stored in a catalog binding."""
    return {
        "password": "<password>",
        "url": "<url>",
        "username": "<username>",
        "api_key": "<api_key>",
    }


@pytest.fixture
def legacy_credentials():
    """watson_conversation_* keys as found in a local config or Kube blob."""
    return {
        "watson_conversation_password": "<password>",
        "watson_conversation_url": "<url>",
        "watson_conversation_username": "<username>",
        "watson_conversation_api_key": "<api_key>",
        "watson_conversation_apikey": "<apikey>",
    }


@pytest.fixture
def normalized_credentials():
    """What legacy_credentials normalize to."""
    return {
        "api_key": "<api_key>",
        "iam_apikey": "<apikey>",
        "password": "<password>",
        "url": "<url>",
        "username": "<username>",
    }


# ---------------------------------------------------------------------------
# Service catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog(credentials):
    """A VCAP_SERVICES document as a dict."""
    return {
        "personality_insights": [
            {"plan": "not-a-plan"},
            {"credentials": {}, "plan": "beta"},
            {"credentials": credentials, "plan": "standard"},
        ],
        "retrieve_and_rank": [
            {
                "name": "retrieve-and-rank-standard",
                "label": "retrieve_and_rank",
                "plan": "standard",
                "credentials": credentials,
            },
        ],
        "natural_language_classifier": [
            {"name": "NLC 1", "plan": "standard", "credentials": {**credentials, "username": "nlc1"}},
            {"name": "NLC 2", "plan": "standard", "credentials": {**credentials, "username": "nlc2"}},
        ],
    }


@pytest.fixture
def catalog_json(catalog):
    return json.dumps(catalog)


# ---------------------------------------------------------------------------
# Flat environment (no catalog)
# ---------------------------------------------------------------------------

@pytest.fixture
def flat_env(credentials):
    """Per-instance variables as injected when VCAP_SERVICES is absent."""
    return {
        "CONVERSATION_W1": json.dumps(credentials),
        "COMPOSE_FOR_REDIS_OV": json.dumps({"name": "Compose for Redis-ov"}),
        "CLOUDANT_NOSQL_DB_X5": json.dumps({"name": "Cloudant NoSQL DB-x5"}),
        "CLOUDANT_NOSQL_DB_X6": json.dumps({"name": "Cloudant NoSQL DB-x6"}),
        "OBJECT_STORAGE_6J": "Not JSON",
        "weather_company_data_wu": json.dumps({"name": "weather-company_data_wu"}),
    }
