"""
Unit tests for vcap_services.resolvers.kube_env — KubeEnvResolver.
"""

import json

import pytest

from vcap_services.core.models import Selector
from vcap_services.resolvers.kube_env import KubeEnvResolver


@pytest.mark.unit
class TestKubeEnvResolver:
    def test_variable_name(self):
        resolver = KubeEnvResolver()
        assert resolver.variable_for("conversation") == "service_watson_conversation"
        assert resolver.variable_for("Conversation") == "service_watson_conversation"

    def test_custom_prefixes(self):
        resolver = KubeEnvResolver(prefix="svc_", service_prefix="ibm")
        assert resolver.variable_for("cos") == "svc_ibm_cos"

    def test_read_raw(self, legacy_credentials):
        env = {"service_watson_conversation": json.dumps(legacy_credentials)}
        assert KubeEnvResolver().read("conversation", env) == legacy_credentials

    def test_resolve_normalizes(self, legacy_credentials, normalized_credentials):
        env = {"service_watson_conversation": json.dumps(legacy_credentials)}
        selector = Selector.build("conversation")
        assert KubeEnvResolver().resolve(selector, env) == normalized_credentials

    def test_canonical_blob(self, normalized_credentials):
        env = {"service_watson_conversation": json.dumps(normalized_credentials)}
        selector = Selector.build("conversation")
        assert KubeEnvResolver().resolve(selector, env) == normalized_credentials

    def test_missing(self):
        assert KubeEnvResolver().resolve(Selector.build("conversation"), {}) == {}

    def test_uppercase_variable_not_used(self, legacy_credentials):
        env = {"SERVICE_WATSON_CONVERSATION": json.dumps(legacy_credentials)}
        assert KubeEnvResolver().resolve(Selector.build("conversation"), env) == {}

    @pytest.mark.parametrize("value", ["Not JSON", "", "[1]", "null"])
    def test_malformed(self, value):
        env = {"service_watson_conversation": value}
        assert KubeEnvResolver().resolve(Selector.build("conversation"), env) == {}

    def test_no_name(self, legacy_credentials):
        env = {"service_watson_conversation": json.dumps(legacy_credentials)}
        assert KubeEnvResolver().resolve(Selector.build(plan="standard"), env) == {}
