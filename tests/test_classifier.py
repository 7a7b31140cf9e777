"""Tests for failure classification."""

from http import HTTPStatus

import pytest

from error_handler.classify import (
    DataConflict,
    EntityNotFound,
    ExplicitStatusFailure,
    FieldFailure,
    GlobalFailure,
    MalformedBody,
    MissingParameter,
    NoRouteFound,
    TypeMismatch,
    Unclassified,
    UnsupportedMediaType,
    UnwritableResponse,
    ValidationFailed,
    classify,
)
from error_handler.codes import generate
from error_handler.model import FieldError, ObjectError


class TestClassificationTable:
    """Tests for the status and message of each failure category."""

    @pytest.mark.parametrize(
        "failure,status,message",
        [
            (MissingParameter("user_id"), 400, "user_id parameter is missing"),
            (
                TypeMismatch("age", "abc", "Integer"),
                400,
                "The parameter 'age' of value 'abc' could not be converted to type 'Integer'",
            ),
            (MalformedBody(), 400, "Malformed JSON request"),
            (UnsupportedMediaType(), 415, "Unsupported Media Type"),
            (EntityNotFound("User 42 was not found"), 404, "User 42 was not found"),
            (DataConflict(root_cause_is_constraint=True), 409, "Database error"),
            (DataConflict(root_cause_is_constraint=False), 500, "Data integrity violation"),
            (UnwritableResponse(), 500, "Error writing JSON output"),
            (NoRouteFound("GET", "/users/42/avatar"), 400, "Could not find the GET method for URL /users/42/avatar"),
            (ExplicitStatusFailure(HTTPStatus.FORBIDDEN, "Account locked"), 403, "Account locked"),
            (ExplicitStatusFailure(HTTPStatus.TOO_MANY_REQUESTS), 429, "Too Many Requests"),
            (Unclassified("boom"), 500, "Internal Server Error"),
        ],
    )
    def test_status_message_and_code(self, failure, status, message):
        """Test status, message and code for each stamped category."""
        error = classify(failure)

        assert error.status.value == status
        assert error.message == message
        assert error.code == generate(str(status), message)
        assert error.sub_errors == ()

    def test_explicit_status_accepts_int(self):
        """Test integer statuses are normalised."""
        error = classify(ExplicitStatusFailure(503))

        assert error.status is HTTPStatus.SERVICE_UNAVAILABLE
        assert error.message == "Service Unavailable"


class TestUnclassified:
    """Tests for the internal error fallback."""

    def test_internal_message_discarded(self):
        """Test the internal message never reaches the ApiError."""
        error = classify(Unclassified("NullPointerException at line 42"))

        assert error.status is HTTPStatus.INTERNAL_SERVER_ERROR
        assert error.message == "Internal Server Error"
        assert "NullPointerException" not in str(error.to_dict())

    def test_internal_message_hidden_from_repr(self):
        """Test the description's repr does not expose the internal message."""
        assert "secret" not in repr(Unclassified("secret token leaked"))


class TestValidationFailed:
    """Tests for validation classification."""

    def test_uses_aggregated_sub_errors(self):
        """Test sub-errors come from the aggregator and no top-level code is set."""
        failure = ValidationFailed(
            field_failures=[FieldFailure("user", "email", "", "must not be blank")],
            global_failures=[GlobalFailure("user", "passwords do not match")],
        )

        error = classify(failure)

        assert error.status is HTTPStatus.BAD_REQUEST
        assert error.message == "Validation error"
        assert error.code is None
        assert error.sub_errors == (
            FieldError("user", "email", "", "must not be blank", generate("email", "must not be blank")),
            ObjectError("user", "passwords do not match", generate("user", "passwords do not match")),
        )

    def test_empty_validation_omits_sub_errors(self):
        """Test an empty validation failure serializes without subErrors."""
        body = classify(ValidationFailed()).to_dict()

        assert "subErrors" not in body
        assert "code" not in body


class TestEntityNotFound:
    """Tests for not-found classification."""

    def test_without_detail(self):
        """Test a message-less not-found uses the phrase and no code."""
        error = classify(EntityNotFound())

        assert error.status is HTTPStatus.NOT_FOUND
        assert error.message == "Not Found"
        assert error.code is None


class TestClassifyContract:
    """Tests for general classify() guarantees."""

    def test_unknown_variant_rejected(self):
        """Test the union is closed."""
        with pytest.raises(TypeError):
            classify(object())  # type: ignore[arg-type]

    def test_code_absent_when_message_unencodable(self):
        """Test code generation failure does not prevent classification."""
        error = classify(EntityNotFound("bad \ud800 detail"))

        assert error.status is HTTPStatus.NOT_FOUND
        assert error.code is None

    def test_each_call_builds_new_error(self):
        """Test results are independent objects."""
        first = classify(MalformedBody())
        second = classify(MalformedBody())

        assert first is not second
        assert first.code == second.code
