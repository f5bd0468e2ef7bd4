"""
Unit tests for collect-all validation.

Tests verify every failing field is reported, in field order,
and that valid input yields the normalized values.
"""

from src.domain.accumulate import (
    ValidationIssue,
    collect,
    to_issue,
    validate_all,
    validate_registration_all,
)
from src.domain.errors import AgeError, EmailError
from src.domain.result import Failure, Success


class TestValidateAll:
    """Tests for validate_all (email + password)."""

    def test_reports_both_issues_in_order(self) -> None:
        """Two invalid fields give two issues, email first."""
        result = validate_all("bad", "short")
        assert result == Failure(
            [
                ValidationIssue(field="email", message="Missing @ symbol"),
                ValidationIssue(field="password", message="Too short"),
            ]
        )

    def test_reports_only_password_issue(self) -> None:
        """A valid email contributes no issue."""
        result = validate_all("a@b.com", "short")
        assert result == Failure([ValidationIssue(field="password", message="Too short")])

    def test_reports_only_email_issue(self) -> None:
        """A valid password contributes no issue."""
        result = validate_all("a@nodomain", "LongPass1")
        assert result == Failure([ValidationIssue(field="email", message="Missing domain")])

    def test_valid_input_succeeds(self) -> None:
        """Both fields valid gives Success with normalized values."""
        assert validate_all("A@B.com", "LongPass1") == Success(
            {"email": "a@b.com", "password": "LongPass1"}
        )


class TestValidateRegistrationAll:
    """Tests for validate_registration_all (email + password + age)."""

    def test_reports_all_three(self) -> None:
        """Every invalid field is reported in email, password, age order."""
        result = validate_registration_all("bademail", "short", 5)
        assert [issue.field for issue in result.error] == ["email", "password", "age"]
        assert result.error[2].message == "Must be 13 or older"

    def test_valid_input_succeeds(self) -> None:
        """All fields valid gives Success with every value."""
        assert validate_registration_all("a@b.com", "SecurePass123", 30) == Success(
            {"email": "a@b.com", "password": "SecurePass123", "age": 30}
        )


class TestCollectHelpers:
    """Tests for collect and to_issue."""

    def test_to_issue_erases_error_type(self) -> None:
        """to_issue keeps only the field and message."""
        assert to_issue("age")(AgeError("Invalid age")) == ValidationIssue("age", "Invalid age")

    def test_collect_with_no_results(self) -> None:
        """Nothing to collect is a Success with no values."""
        assert collect() == Success({})

    def test_collect_preserves_given_order(self) -> None:
        """Issues follow argument order, not field name order."""
        result = collect(
            ("zeta", Failure(EmailError("Missing domain"))),
            ("alpha", Failure(AgeError("Invalid age"))),
        )
        assert [issue.field for issue in result.error] == ["zeta", "alpha"]
