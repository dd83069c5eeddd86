"""
Tests for the request catalog
"""

import pytest

from crm_webapi.requests import REQUESTS, Request, UnknownRequestError, get_request, search_requests


@pytest.mark.unit
class TestCatalog:
    def test_catalog_size(self):
        assert len(REQUESTS) == 235

    def test_keys_match_request_names(self):
        """Test every entry is keyed by its name plus 'Request'"""
        for key, request in REQUESTS.items():
            assert key == f"{request.name}Request"

    def test_functions_and_actions(self):
        """Test entries are GET functions or POST actions"""
        methods = {request.method for request in REQUESTS.values()}

        assert methods == {"GET", "POST"}
        assert len(search_requests(method="GET")) == 90
        assert len(search_requests(method="POST")) == 145

    def test_get_request_by_either_name(self):
        assert get_request("WhoAmIRequest") is get_request("WhoAmI")

    def test_who_am_i_entry(self):
        request = get_request("WhoAmI")

        assert request == Request(method="GET", name="WhoAmI")

    def test_bound_entry(self):
        request = get_request("RetrieveTeamPrivilegesRequest")

        assert request.method == "GET"
        assert request.bound is True
        assert request.entity_name == "team"
        assert request.entity_id == ""

    def test_unknown_request(self):
        with pytest.raises(UnknownRequestError):
            get_request("DoesNotExist")

    def test_unknown_request_is_key_error(self):
        with pytest.raises(KeyError):
            get_request("DoesNotExist")

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            REQUESTS["WhoAmIRequest"] = Request()

    def test_derivation_leaves_catalog_unchanged(self):
        """Test specializing a catalog entry does not alter the template"""
        derived = get_request("AddMembersTeam").with_(entity_id="abc", payload={"Members": []})

        assert derived.entity_id == "abc"
        assert get_request("AddMembersTeam").entity_id == ""
        assert get_request("AddMembersTeam").payload is None

    def test_search_is_case_insensitive_and_sorted(self):
        results = search_requests("team")

        assert "RetrieveTeamPrivilegesRequest" in results
        assert "AddMembersTeamRequest" in results
        assert results == sorted(results)

    def test_search_by_boundness(self):
        bound = search_requests("Team", bound=True)
        unbound = search_requests("Team", bound=False)

        assert "RetrieveTeamPrivilegesRequest" in bound
        assert "RetrieveTeamPrivilegesRequest" not in unbound
        assert all(get_request(name).bound for name in bound)

    def test_search_without_matches(self):
        assert search_requests("NoSuchOperation") == []
