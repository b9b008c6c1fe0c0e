"""Tests for form validation and field access."""

import pytest

from core.errors import FormValidationError
from core.form import MISSING_ENTRY, get, get_at, parse_form, text


class TestParseForm:
    def test_keeps_scalars_and_sequences(self):
        form = parse_form({"business_name": "Acme", "offering_name": ["Sprint", "Audit"]})
        assert form == {"business_name": "Acme", "offering_name": ["Sprint", "Audit"]}

    def test_drops_null_fields(self):
        form = parse_form({"business_name": None, "user_id": "7"})
        assert "business_name" not in form
        assert form["user_id"] == "7"

    def test_normalizes_numbers_and_booleans(self):
        form = parse_form({"user_id": 42, "budget": 1.5, "newsletter": True, "flags": [False, 3]})
        assert form == {"user_id": "42", "budget": "1.5", "newsletter": "true", "flags": ["false", "3"]}

    def test_null_list_entries_become_empty(self):
        form = parse_form({"icp_pain_points": ["time", None]})
        assert form["icp_pain_points"] == ["time", ""]

    @pytest.mark.parametrize("body", [None, [], "text", 5])
    def test_rejects_non_object_body(self, body):
        with pytest.raises(FormValidationError) as exc_info:
            parse_form(body)
        assert exc_info.value.code == "INVALID_FORM"

    def test_rejects_object_value(self):
        with pytest.raises(FormValidationError) as exc_info:
            parse_form({"business_name": {"en": "Acme"}})
        assert exc_info.value.details == {"field": "business_name"}

    def test_rejects_nested_list(self):
        with pytest.raises(FormValidationError):
            parse_form({"offering_name": [["Sprint"]]})

    def test_empty_body_is_valid(self):
        assert parse_form({}) == {}


class TestFieldAccess:
    def test_get_returns_value(self):
        assert get({"business_name": "Acme"}, "business_name") == "Acme"

    def test_get_missing_is_empty_string(self):
        assert get({}, "business_name") == ""

    def test_get_empty_sequence_is_empty_string(self):
        assert get({"offering_name": []}, "offering_name") == ""

    def test_get_at_pairs_by_index(self):
        form = {"icp_pain_points": ["time", "budget"]}
        assert get_at(form, "icp_pain_points", 0) == "time"
        assert get_at(form, "icp_pain_points", 1) == "budget"

    def test_get_at_out_of_range(self):
        assert get_at({"key_benefit": ["fast"]}, "key_benefit", 3) == MISSING_ENTRY

    def test_get_at_missing_field(self):
        assert get_at({}, "key_benefit", 0) == "N/A"

    def test_get_at_blank_entry(self):
        assert get_at({"key_benefit": [""]}, "key_benefit", 0) == "N/A"

    def test_get_at_scalar_field(self):
        assert get_at({"key_benefit": "fast"}, "key_benefit", 0) == "N/A"

    def test_text_joins_sequences(self):
        assert text(["Craft", "Candor"]) == "Craft, Candor"
        assert text("Craft") == "Craft"
