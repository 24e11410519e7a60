"""Tests for the error taxonomy and the validation guard."""

import pytest

from quill.errors import CONFLICT, INVALID_INPUT, NOT_FOUND, UNAUTHORIZED, ApiError, fail_if


class TestFailIf:
    @pytest.mark.parametrize("condition", [False, None, 0, "", []])
    def test_falsy_condition_does_nothing(self, condition):
        fail_if(condition, "should not raise", NOT_FOUND)

    def test_truthy_condition_raises(self):
        with pytest.raises(ApiError) as exc_info:
            fail_if(True, "No post found!", NOT_FOUND)

        assert exc_info.value.message == "No post found!"
        assert exc_info.value.status_code == 404
        assert exc_info.value.data is None

    def test_non_empty_list_counts_as_failure(self):
        errors = [{"message": "E-mail is invalid!"}]

        with pytest.raises(ApiError) as exc_info:
            fail_if(errors, "Invalid Input used..", INVALID_INPUT, data=errors)

        assert exc_info.value.status_code == 422
        assert exc_info.value.data == errors

    def test_object_counts_as_failure(self):
        with pytest.raises(ApiError, match="User already Exists"):
            fail_if(object(), "User already Exists", CONFLICT)


class TestApiError:
    def test_str_is_message(self):
        assert str(ApiError("Not Authenticated", UNAUTHORIZED)) == "Not Authenticated"

    def test_extensions_without_data(self):
        assert ApiError("Not Authenticated", UNAUTHORIZED).extensions == {"status": 401}

    def test_extensions_with_data(self):
        data = [{"message": "Title is Invalid"}]
        error = ApiError("Invalid Input used..", INVALID_INPUT, data)

        assert error.extensions == {"status": 422, "data": data}

    def test_status_constants(self):
        assert (UNAUTHORIZED, NOT_FOUND, CONFLICT, INVALID_INPUT) == (401, 404, 409, 422)
