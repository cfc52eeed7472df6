"""Tests for FormSession."""

import pytest

from venture_cms.business.models import BusinessPayload
from venture_cms.config.models import FormDefaults
from venture_cms.forms.business_form import business_form_registry
from venture_cms.forms.exceptions import SubmissionBlockedError, UnknownFieldError
from venture_cms.forms.models import SessionMode
from venture_cms.forms.session import FormSession, default_values, values_from_record


@pytest.fixture
def session() -> FormSession:
    return FormSession.create()


def fill_valid(session: FormSession, description: str) -> None:
    """Set valid values for every required field."""
    session.set_field("business_name", "Sample Cafe")
    session.set_field("business_type", "shop")
    session.set_field("description", description)
    session.set_field("address", "45 Panganiban Drive, Barangay Tinago")
    session.set_field("city", "Naga City")
    session.set_field("province", "Camarines Sur")
    session.set_field("latitude", 13.6245)
    session.set_field("longitude", 123.1889)


class TestCreateMode:
    """Tests for create-mode defaults."""

    def test_every_field_has_a_value(self, session):
        assert set(session.values) == set(business_form_registry().field_names)

    def test_placeholders(self, session):
        values = session.values
        assert session.mode == SessionMode.CREATE
        assert session.record_id is None
        assert values["business_name"] == ""
        assert values["business_type"] == "shop"
        assert values["latitude"] == 13.6218
        assert values["longitude"] == 123.1948
        assert values["email"] == ""

    def test_no_errors_before_editing(self, session):
        assert session.errors == {}

    def test_parameterized_center_point(self):
        defaults = FormDefaults(default_latitude=14.5995, default_longitude=120.9842)
        values = default_values(business_form_registry(), defaults)
        assert (values["latitude"], values["longitude"]) == (14.5995, 120.9842)


class TestEditMode:
    """Tests for seeding a session from an existing record."""

    def test_maps_record_fields(self, existing_business):
        session = FormSession.from_record(existing_business)
        values = session.values

        assert session.mode == SessionMode.EDIT
        assert session.record_id == existing_business.id
        assert values["business_name"] == "Naga Heritage Inn"
        assert values["business_type"] == "accommodation"
        assert values["postal_code"] == "4400"
        assert values["latitude"] == 13.6235
        assert values["longitude"] == 123.1815

    def test_null_columns_become_placeholders(self, existing_business):
        values = FormSession.from_record(existing_business).values
        assert values["facebook_url"] == ""
        assert values["twitter_url"] == ""

    def test_accepts_plain_mapping(self):
        record = {
            "id": "0b7e6f1e-5a34-4c2b-9d0a-3d1c9c3e9f10",
            "business_name": "Sample Cafe",
            "location": "SRID=4326;POINT(123.2 13.6)",
        }
        session = FormSession.from_record(record)
        assert str(session.record_id) == record["id"]
        assert session.get("business_type") == "shop"
        assert (session.get("latitude"), session.get("longitude")) == (13.6, 123.2)

    @pytest.mark.parametrize("location", ["not-a-point", None, "", "POINT(abc def)", 42])
    def test_malformed_geography_falls_back(self, location):
        """Should use the center point instead of raising."""
        values = values_from_record(
            {"business_name": "Sample Cafe", "location": location},
            business_form_registry(),
            FormDefaults(),
        )
        assert values["latitude"] == 13.6218
        assert values["longitude"] == 123.1948

    def test_missing_geography_falls_back(self):
        session = FormSession.from_record({"business_name": "Sample Cafe"})
        assert session.get("latitude") == 13.6218

    def test_starts_without_errors(self, existing_business):
        assert FormSession.from_record(existing_business).errors == {}


class TestSetField:
    """Tests for field updates and step-scoped revalidation."""

    def test_updates_value(self, session):
        session.set_field("business_name", "Sample Cafe")
        assert session.get("business_name") == "Sample Cafe"

    def test_revalidates_owning_step_only(self, session):
        """Editing a step 1 field evaluates all of step 1 and nothing else."""
        session.set_field("business_name", "Sample Cafe")

        errors = session.errors
        assert "description" in errors
        assert "business_name" not in errors
        assert session.errors_for_step(2) == {}
        assert session.errors_for_step(3) == {}

    def test_invalid_value_sets_message(self, session):
        session.set_field("email", "owner-at-example")
        assert session.errors_for_step(3) == {"email": "Please enter a valid email address"}

    def test_fixing_value_clears_message(self, session):
        session.set_field("email", "owner-at-example")
        session.set_field("email", "owner@example.com")
        assert session.errors_for_step(3) == {}

    def test_other_steps_keep_last_errors(self, session):
        session.set_field("business_name", "ab")
        session.set_field("email", "owner@example.com")
        assert "business_name" in session.errors_for_step(1)

    def test_numeric_strings_are_coerced(self, session):
        session.set_field("latitude", "13.75")
        assert session.get("latitude") == 13.75

    def test_unparseable_number_kept_and_flagged(self, session):
        session.set_field("longitude", "east")
        assert session.get("longitude") == "east"
        assert session.errors_for_step(2)["longitude"] == "Longitude must be a number"

    def test_unknown_field_raises(self, session):
        with pytest.raises(UnknownFieldError):
            session.set_field("owner_name", "Juan")

    def test_values_are_copies(self, session):
        session.values["business_name"] = "mutated"
        assert session.get("business_name") == ""


class TestValidateStep:
    """Tests for explicit step validation."""

    def test_validate_step_stores_errors(self, session):
        assert session.validate_step(1) is False
        assert set(session.errors_for_step(1)) == {"business_name", "description"}

    def test_check_step_does_not_store(self, session):
        assert "business_name" in session.check_step(1)
        assert session.errors == {}

    def test_optional_step_valid_when_blank(self, session):
        assert session.is_step_valid(3)


class TestToPayload:
    """Tests for payload conversion."""

    def test_payload_from_valid_values(self, session, sample_description):
        fill_valid(session, sample_description)
        payload = session.to_payload()

        assert isinstance(payload, BusinessPayload)
        assert payload.business_name == "Sample Cafe"
        assert payload.location == "POINT(123.1889 13.6245)"
        assert payload.phone is None
        assert payload.email is None
        assert payload.website is None
        assert payload.postal_code is None

    def test_non_blank_optional_values_pass_through(self, session, sample_description):
        fill_valid(session, sample_description)
        session.set_field("email", "hello@samplecafe.ph")
        session.set_field("postal_code", "4400")

        payload = session.to_payload()
        assert payload.email == "hello@samplecafe.ph"
        assert payload.postal_code == "4400"

    def test_blocked_by_invalid_field(self, session, sample_description):
        fill_valid(session, sample_description)
        session.set_field("website", "samplecafe")

        with pytest.raises(SubmissionBlockedError) as exc_info:
            session.to_payload()
        assert list(exc_info.value.field_errors) == ["website"]

    def test_blocked_by_never_validated_step(self, session):
        """Fresh sessions are blocked even though no errors are stored yet."""
        with pytest.raises(SubmissionBlockedError) as exc_info:
            session.to_payload()
        assert "business_name" in exc_info.value.field_errors

    def test_edit_round_trip_preserves_location(self, existing_business):
        payload = FormSession.from_record(existing_business).to_payload()
        assert payload.location == existing_business.location
        assert payload.facebook_url is None
