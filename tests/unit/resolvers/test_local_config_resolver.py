"""
Unit tests for vcap_services.resolvers.local_config — LocalConfigResolver.
"""

import pytest

from vcap_services.core.models import Selector
from vcap_services.resolvers.local_config import LocalConfigResolver


@pytest.mark.unit
class TestLocalConfigResolver:
    def test_applies_to(self, legacy_credentials):
        assert LocalConfigResolver(legacy_credentials).applies_to({})
        assert not LocalConfigResolver({}).applies_to({})
        assert not LocalConfigResolver(None).applies_to({})
        assert not LocalConfigResolver("text").applies_to({})

    def test_extract_keeps_legacy_keys(self, legacy_credentials):
        config = {**legacy_credentials, "watson_discovery_url": "d", "PORT": "3000"}
        assert LocalConfigResolver(config).extract("conversation") == legacy_credentials

    def test_extract_skips_empty_values(self):
        config = {"watson_conversation_username": "u", "watson_conversation_password": ""}
        assert LocalConfigResolver(config).extract("conversation") == {"watson_conversation_username": "u"}

    def test_resolve(self, legacy_credentials, normalized_credentials):
        selector = Selector.build("conversation")
        assert LocalConfigResolver(legacy_credentials).resolve(selector, {}) == normalized_credentials

    def test_resolve_ignores_unrelated_canonical_keys(self):
        config = {"username": "other", "watson_conversation_apikey": "k"}
        selector = Selector.build("conversation")
        assert LocalConfigResolver(config).resolve(selector, {}) == {"iam_apikey": "k"}

    def test_custom_service_prefix(self):
        config = {"ibm_cos_apikey": "k"}
        selector = Selector.build("cos")
        assert LocalConfigResolver(config, service_prefix="ibm").resolve(selector, {}) == {"iam_apikey": "k"}

    @pytest.mark.parametrize("config", [None, {}, "text", ["watson_conversation_url"]])
    def test_empty_or_invalid(self, config):
        assert LocalConfigResolver(config).resolve(Selector.build("conversation"), {}) == {}
