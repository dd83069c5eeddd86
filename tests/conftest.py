"""
Pytest configuration and fixtures for CRM Web API tests
"""

import pytest
from unittest.mock import MagicMock

from crm_webapi.config import Settings
from crm_webapi.endpoint import StaticEndpointProvider
from crm_webapi.metadata import PluralizingEntitySetResolver


BASE_URL = "https://contoso.crm.dynamics.com/api/data/v9.2/"
TEAM_ID = "3f955cb8-c36c-e511-80d2-00155d2a68d2"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def mock_settings():
    """Mock settings for testing"""
    return Settings(
        crm_url="https://contoso.crm.dynamics.com",
        api_version="9.2",
        access_token="mock-token",
        webapi_client="mock",
        entity_set_overrides={"msdyn_workorder": "msdyn_workorders"},
    )


@pytest.fixture
def endpoint_provider():
    return StaticEndpointProvider("https://contoso.crm.dynamics.com", "9.2")


@pytest.fixture
def entity_set_resolver():
    return PluralizingEntitySetResolver()


@pytest.fixture
def mock_resolver():
    """Resolver stub mapping every entity to 'teams'"""
    resolver = MagicMock()
    resolver.get_set_name.return_value = "teams"
    return resolver


@pytest.fixture
def team_privileges_request():
    """Bound function with a braced team id"""
    from crm_webapi.requests import Request

    return Request(
        method="GET",
        name="RetrieveTeamPrivileges",
        bound=True,
        entity_name="team",
        entity_id="{" + TEAM_ID + "}",
    )
