"""Tests for the registration form model."""

import pytest

from src.core.exceptions import ValidationError
from src.models.registration import RegistrationModel


@pytest.fixture
def valid_registration() -> RegistrationModel:
    return RegistrationModel(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        password="analytical",
        confirm_password="analytical",
        terms_accepted=True,
    )


class TestRegistrationModel:
    """Test registration snapshot and validation."""

    def test_valid_form(self, valid_registration: RegistrationModel):
        assert valid_registration.validate_for_submit() == []
        valid_registration.ensure_submittable()

    def test_empty_form_reports_everything_in_order(self):
        assert RegistrationModel().validate_for_submit() == [
            "Email is required.",
            "Password is required.",
            "You must agree to the Terms of Service.",
        ]

    def test_bad_email(self, valid_registration: RegistrationModel):
        valid_registration.email = "not-an-email"
        assert valid_registration.validate_for_submit() == ["Email address is not valid."]

    def test_short_password_and_mismatch(self, valid_registration: RegistrationModel):
        valid_registration.password = "short"
        assert valid_registration.validate_for_submit() == [
            "Password must be at least 8 characters.",
            "Passwords do not match.",
        ]

    def test_ensure_submittable_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationModel(email="a@b.co").ensure_submittable()
        assert exc_info.value.errors[0] == "Password is required."

    def test_from_fields_trims_names_not_passwords(self):
        model = RegistrationModel.from_fields(
            " Ada ", " ", " ada@example.com ", " secret pw ", " secret pw ", True
        )
        assert model.first_name == "Ada"
        assert model.last_name == ""
        assert model.email == "ada@example.com"
        assert model.password == " secret pw "
        assert model.full_name == "Ada"

    def test_full_name(self, valid_registration: RegistrationModel):
        assert valid_registration.full_name == "Ada Lovelace"
