"""Unit tests for login and signup input validation."""

import pytest

from blogger_identity.application.validation import (
    PASSWORDS_DO_NOT_MATCH,
    validate_login,
    validate_signup,
)

VALID_SIGNUP = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "password": "Str0ng!pw",
    "confirmPassword": "Str0ng!pw",
}


class TestValidateLogin:
    def test_valid_payload(self):
        result = validate_login({"email": "a@b.co", "password": "x"})

        assert result.success
        assert result.data is not None
        assert result.data.email == "a@b.co"
        assert result.data.password == "x"
        assert result.errors == {}

    def test_empty_payload_reports_required_fields(self):
        result = validate_login({})

        assert not result.success
        assert result.errors == {
            "email": "Email is required!",
            "password": "Password is required!",
        }

    def test_invalid_email(self):
        result = validate_login({"email": "nope", "password": "x"})

        assert result.errors == {"email": "Invalid email!"}

    def test_none_values_count_as_missing(self):
        result = validate_login({"email": None, "password": None})

        assert result.errors["email"] == "Email is required!"
        assert result.errors["password"] == "Password is required!"

    def test_non_string_value_is_a_field_error(self):
        result = validate_login({"email": 123, "password": "x"})

        assert not result.success
        assert set(result.errors) == {"email"}

    def test_unknown_keys_are_ignored(self):
        result = validate_login({"email": "a@b.co", "password": "x", "extra": 1})

        assert result.success


class TestValidateSignupName:
    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("", "Name is required!"),
            ("J4ne", "Only alphabets and spaces allowed"),
            ("Jane-Doe", "Only alphabets and spaces allowed"),
            ("Jane  Doe", "Name must only contain letters and single spaces between"),
            (" Jane", "Name must only contain letters and single spaces between"),
            ("Jane ", "Name must only contain letters and single spaces between"),
            ("   ", "Name must only contain letters and single spaces between"),
            ("Jane\n", "Only alphabets and spaces allowed"),
        ],
    )
    def test_name_errors(self, name, message):
        result = validate_signup({**VALID_SIGNUP, "name": name})

        assert result.errors == {"name": message}

    def test_single_word_name_is_valid(self):
        assert validate_signup({**VALID_SIGNUP, "name": "Jane"}).success


class TestValidateSignupEmail:
    def test_required(self):
        result = validate_signup({**VALID_SIGNUP, "email": ""})

        assert result.errors == {"email": "Email is required"}

    def test_invalid(self):
        result = validate_signup({**VALID_SIGNUP, "email": "jane@"})

        assert result.errors == {"email": "Invalid Email"}


class TestValidateSignupPassword:
    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("", "Password is too short!"),
            ("Ab1!", "Password is too short!"),
            ("Abcdefgh1!Abcdefgh1!x", "Password is too long!"),
            (
                "abcdefgh",
                "Password must contain at least one uppercase and lowercase "
                "letter, digit, and special character",
            ),
            (
                "Abcdefg1",
                "Password must contain at least one uppercase and lowercase "
                "letter, digit, and special character",
            ),
            (
                "Str0ng!pw\n",
                "Password must contain at least one uppercase and lowercase "
                "letter, digit, and special character",
            ),
        ],
    )
    def test_password_errors(self, password, message):
        result = validate_signup(
            {**VALID_SIGNUP, "password": password, "confirmPassword": password},
        )

        assert result.errors["password"] == message

    def test_boundary_lengths_are_valid(self):
        for password in ("Abcde1!x", "Abcdefgh1!Abcdefgh1!"):
            result = validate_signup(
                {**VALID_SIGNUP, "password": password, "confirmPassword": password},
            )
            assert result.success, password


class TestValidateSignupConfirmPassword:
    def test_required(self):
        result = validate_signup({**VALID_SIGNUP, "confirmPassword": ""})

        assert result.errors == {"confirmPassword": "Confirm password is required!"}

    def test_mismatch_is_reported_on_confirm_password(self):
        result = validate_signup({**VALID_SIGNUP, "confirmPassword": "Str0ng!px"})

        assert result.errors == {"confirmPassword": PASSWORDS_DO_NOT_MATCH}

    def test_mismatch_reported_alongside_other_errors(self):
        result = validate_signup(
            {"name": "", "email": "", "password": "short", "confirmPassword": "other"},
        )

        assert result.errors == {
            "name": "Name is required!",
            "email": "Email is required",
            "password": "Password is too short!",
            "confirmPassword": PASSWORDS_DO_NOT_MATCH,
        }


class TestValidateSignupSuccess:
    def test_data_keeps_values_unchanged(self):
        result = validate_signup(VALID_SIGNUP)

        assert result.success
        assert result.data is not None
        assert result.data.model_dump(by_alias=True) == VALID_SIGNUP

    def test_snake_case_confirm_key_is_not_accepted(self):
        payload = {k: v for k, v in VALID_SIGNUP.items() if k != "confirmPassword"}

        result = validate_signup(
            {**payload, "confirm_password": VALID_SIGNUP["password"]},
        )

        assert result.errors == {"confirmPassword": "Confirm password is required!"}
