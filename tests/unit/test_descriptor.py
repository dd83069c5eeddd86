"""
Tests for the Request descriptor
"""

import dataclasses
import pytest

from crm_webapi.requests import Request


@pytest.mark.unit
class TestRequest:
    def test_defaults(self):
        """Test an empty request matches the base request defaults"""
        request = Request()

        assert request.method == ""
        assert request.name == ""
        assert request.bound is False
        assert request.entity_name == ""
        assert request.entity_id == ""
        assert request.payload is None
        assert request.headers is None
        assert request.url_params is None
        assert request.is_async is True
        assert dict(request.extras) == {}

    def test_is_immutable(self):
        """Test fields cannot be assigned"""
        request = Request(name="WhoAmI")

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.name = "Other"

    def test_with_overrides_fields(self):
        """Test overridden fields take the override value, others are inherited"""
        base = Request(method="GET", name="RetrieveTeamPrivileges", bound=True, entity_name="team")

        derived = base.with_({"entity_id": "abc"})

        assert derived.entity_id == "abc"
        assert derived.method == "GET"
        assert derived.name == "RetrieveTeamPrivileges"
        assert derived.bound is True
        assert derived.entity_name == "team"

    def test_with_leaves_base_untouched(self):
        """Test deriving does not alter the base request"""
        base = Request(method="GET", name="RetrieveTeamPrivileges", bound=True, entity_name="team")

        base.with_({"entityId": "abc"})

        assert base.entity_id == ""
        assert base.entity_name == "team"

    def test_with_chained_derivation(self):
        """Test inheritance holds through several derivations"""
        base = Request(method="POST", name="AddMembersTeam", bound=True, entity_name="team")

        first = base.with_(entity_id="1")
        second = first.with_(payload={"Members": []})
        third = second.with_(entity_id="2", is_async=False)

        assert third.method == "POST"
        assert third.name == "AddMembersTeam"
        assert third.entity_name == "team"
        assert third.entity_id == "2"
        assert third.payload == {"Members": []}
        assert third.is_async is False

        assert second.entity_id == "1"
        assert second.is_async is True
        assert first.payload is None
        assert base.entity_id == ""

    def test_with_accepts_vendor_field_names(self):
        """Test camelCase field names map to request fields"""
        request = Request(name="Rollup").with_({
            "entityName": "account",
            "entityId": "abc",
            "urlParams": {"Query": "@q"},
            "async": False,
        })

        assert request.entity_name == "account"
        assert request.entity_id == "abc"
        assert request.url_params == (("Query", "@q"),)
        assert request.is_async is False

    def test_with_keyword_arguments_win_over_mapping(self):
        """Test keyword overrides are applied after the mapping"""
        request = Request().with_({"name": "First"}, name="Second")

        assert request.name == "Second"

    def test_with_no_overrides_returns_equal_copy(self):
        """Test empty overrides inherit everything"""
        base = Request(method="GET", name="WhoAmI")

        assert base.with_() == base
        assert base.with_({}) == base

    def test_unknown_fields_are_kept_in_extras(self):
        """Test unknown keys are stored without becoming fields"""
        base = Request(name="WhoAmI")

        derived = base.with_({"traceId": "t-1"})
        further = derived.with_({"note": "x"})

        assert derived.get("traceId") == "t-1"
        assert further.get("traceId") == "t-1"
        assert further.get("note") == "x"
        assert "traceId" not in base.extras
        assert not hasattr(derived, "traceId")

    def test_get_reads_fields_and_aliases(self):
        """Test get() resolves Python names, vendor names and defaults"""
        request = Request(entity_name="team", is_async=False)

        assert request.get("entity_name") == "team"
        assert request.get("entityName") == "team"
        assert request.get("async") is False
        assert request.get("missing", "default") == "default"

    def test_url_params_mapping_keeps_order(self):
        """Test url_params keep mapping insertion order as pairs"""
        request = Request(url_params={"b": 1, "a": 2, "c": 3})

        assert request.url_params == (("b", 1), ("a", 2), ("c", 3))

    def test_url_params_accept_pairs(self):
        """Test url_params accept a sequence of pairs"""
        request = Request(url_params=[("Target", "x"), ("Query", "y")])

        assert request.url_params == (("Target", "x"), ("Query", "y"))

    def test_headers_formats(self):
        """Test headers accept mappings, pairs and key/value dicts"""
        expected = (("Prefer", "return=representation"), ("MSCRM.SuppressDuplicateDetection", "false"))

        from_mapping = Request(headers=dict(expected))
        from_pairs = Request(headers=list(expected))
        from_dicts = Request(headers=[{"key": k, "value": v} for k, v in expected])

        assert from_mapping.headers == expected
        assert from_pairs.headers == expected
        assert from_dicts.headers == expected

    def test_to_dict(self):
        """Test plain representation of the fields"""
        request = Request(method="GET", name="Rollup", url_params={"Target": "x"},
                          headers={"Prefer": "odata.maxpagesize=10"})

        result = request.to_dict()

        assert result["method"] == "GET"
        assert result["name"] == "Rollup"
        assert result["url_params"] == [["Target", "x"]]
        assert result["headers"] == [["Prefer", "odata.maxpagesize=10"]]
        assert result["is_async"] is True

    def test_to_dict_keeps_repeated_parameters(self):
        """Test repeated parameter names survive as they do in the URL"""
        request = Request(name="F", url_params=[("A", 1), ("A", 2)])

        assert request.to_dict()["url_params"] == [["A", 1], ["A", 2]]
