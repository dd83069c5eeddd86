"""
Tests for entity set resolvers
"""

import httpx
import pytest

from crm_webapi.metadata import (
    EntitySetResolutionError,
    MetadataEntitySetResolver,
    PluralizingEntitySetResolver,
)
from crm_webapi.requests import build_url, get_request


BASE_URL = "https://contoso.crm.dynamics.com/api/data/v9.2/"

ENTITY_DEFINITIONS = {
    "value": [
        {"LogicalName": "account", "EntitySetName": "accounts"},
        {"LogicalName": "activityparty", "EntitySetName": "activityparties"},
        {"LogicalName": "msdyn_workorder", "EntitySetName": "msdyn_workorders"},
    ]
}


@pytest.mark.unit
class TestPluralizingEntitySetResolver:
    @pytest.mark.parametrize("logical_name, expected", [
        ("account", "accounts"),
        ("team", "teams"),
        ("opportunity", "opportunities"),
        ("address", "addresses"),
        ("systemuser", "systemusers"),
    ])
    def test_pluralization(self, logical_name, expected):
        assert PluralizingEntitySetResolver().get_set_name(logical_name) == expected

    def test_override_wins(self):
        resolver = PluralizingEntitySetResolver({"opportunity": "opps"})

        assert resolver.get_set_name("opportunity") == "opps"
        assert resolver.get_set_name("account") == "accounts"

    def test_empty_name_is_pluralized(self):
        assert PluralizingEntitySetResolver().get_set_name("") == "s"

    def test_bound_request_without_entity_name_builds(self):
        """Test a missing entity name gives a wrong but well-formed URL"""
        request = get_request("GetDefaultPriceLevel").with_(entity_id="{1}")

        url = build_url(request, BASE_URL, PluralizingEntitySetResolver())

        assert url == f"{BASE_URL}s(1)/Microsoft.Dynamics.CRM.GetDefaultPriceLevel()"


@pytest.mark.unit
class TestMetadataEntitySetResolver:
    @pytest.fixture
    def requested_urls(self):
        return []

    @pytest.fixture
    def transport(self, requested_urls):
        def handler(request: httpx.Request) -> httpx.Response:
            requested_urls.append(str(request.url))
            return httpx.Response(200, json=ENTITY_DEFINITIONS)

        return httpx.MockTransport(handler)

    async def test_load(self, endpoint_provider, transport, requested_urls):
        """Test entity definitions are fetched and cached"""
        resolver = MetadataEntitySetResolver(endpoint_provider, token="t", transport=transport)

        count = await resolver.load()

        assert count == 3
        assert len(requested_urls) == 1
        assert "EntityDefinitions" in requested_urls[0]
        assert resolver.get_set_name("activityparty") == "activityparties"
        assert resolver.get_resolver_info()["loaded"] is True

    async def test_unknown_entity_without_fallback(self, endpoint_provider, transport):
        resolver = MetadataEntitySetResolver(endpoint_provider, transport=transport)
        await resolver.load()

        with pytest.raises(EntitySetResolutionError):
            resolver.get_set_name("team")

    async def test_unknown_entity_uses_fallback(self, endpoint_provider, transport):
        resolver = MetadataEntitySetResolver(
            endpoint_provider, fallback=PluralizingEntitySetResolver(), transport=transport
        )
        await resolver.load()

        assert resolver.get_set_name("team") == "teams"

    def test_unloaded_resolver_uses_fallback(self, endpoint_provider):
        resolver = MetadataEntitySetResolver(endpoint_provider, fallback=PluralizingEntitySetResolver())

        assert resolver.get_set_name("account") == "accounts"

    async def test_load_failure_propagates(self, endpoint_provider):
        """Test HTTP errors during load are re-raised"""
        transport = httpx.MockTransport(lambda request: httpx.Response(401, text="Unauthorized"))
        resolver = MetadataEntitySetResolver(endpoint_provider, transport=transport)

        with pytest.raises(httpx.HTTPStatusError):
            await resolver.load()
        assert resolver.get_resolver_info()["loaded"] is False
