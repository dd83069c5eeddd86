"""
Tests for tool helpers and the command line
"""

import pytest

from crm_webapi.config import reset_settings
from crm_webapi.main import parse_param, preview_url
from crm_webapi.requests import UnknownRequestError
from crm_webapi.tools.registry import derive_request, describe_catalog_request


@pytest.mark.unit
class TestToolHelpers:
    def test_derive_request(self):
        request = derive_request("RetrieveTeamPrivilegesRequest", {"entityId": "abc"})

        assert request.entity_id == "abc"
        assert request.entity_name == "team"

    def test_derive_request_without_overrides(self):
        assert derive_request("WhoAmI").name == "WhoAmI"

    def test_derive_unknown_request(self):
        with pytest.raises(UnknownRequestError):
            derive_request("Nope", {})

    def test_describe_bound_request_with_entity(self):
        description = describe_catalog_request("RetrieveTeamPrivileges")

        assert description["request_name"] == "RetrieveTeamPrivilegesRequest"
        assert description["required_overrides"] == ["entityId"]

    def test_describe_bound_request_without_entity(self):
        description = describe_catalog_request("GetQuantityDecimal")

        assert description["required_overrides"] == ["entityId", "entityName"]

    def test_describe_unbound_request(self):
        assert describe_catalog_request("WhoAmI")["required_overrides"] == []


@pytest.mark.unit
class TestCommandLine:
    @pytest.fixture(autouse=True)
    def settings_env(self, monkeypatch):
        monkeypatch.setenv("CRM_URL", "https://contoso.crm.dynamics.com")
        reset_settings()
        yield
        reset_settings()

    def test_parse_param(self):
        assert parse_param("Query=a=b") == ("Query", "a=b")

    def test_parse_param_requires_separator(self):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_param("Query")

    def test_preview_url(self):
        url = preview_url("CalculateRollupField", params=[("Target", "t"), ("FieldName", "'f'")])

        assert url == (
            "https://contoso.crm.dynamics.com/api/data/v9.2/"
            "CalculateRollupField(Target=@p1,FieldName=@p2)?@p1=t&@p2='f'"
        )

    def test_preview_bound_url(self):
        url = preview_url("GetQuantityDecimal", entity_id="{1}", entity_name="quote")

        assert url.endswith("quotes(1)/Microsoft.Dynamics.CRM.GetQuantityDecimal()")
