"""
Pytest configuration and fixtures for matrix toolkit tests.
"""
import os
import sys
import pytest
from unittest.mock import MagicMock

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Set test environment variables before importing anything
os.environ.setdefault("GOOGLE_CREDENTIALS_JSON", '{"type": "service_account", "project_id": "test"}')
os.environ.setdefault("MATRIX_SPREADSHEET_ID", "test-spreadsheet-id")


# ========== Response Assertion Helpers ==========

class ResponseAssertions:
    """Helper class for asserting handler response structures."""

    @staticmethod
    def assert_success(response: dict, op: str | None = None) -> dict:
        """Assert response is successful and return data.

        Args:
            response: The response dict to check
            op: Optional operation name to verify

        Returns:
            The data dict from the response
        """
        assert response.get("ok") is True, f"Expected success, got: {response}"
        if op:
            assert response.get("op") == op, f"Expected op={op}, got {response.get('op')}"
        return response.get("data", {})

    @staticmethod
    def assert_error(response: dict, code: str, op: str | None = None) -> dict:
        """Assert response is an error with given code.

        Args:
            response: The response dict to check
            code: Expected error code
            op: Optional operation name to verify

        Returns:
            The error dict from the response
        """
        assert response.get("ok") is False, f"Expected error, got success: {response}"
        assert response.get("error", {}).get("code") == code, \
            f"Expected error code {code}, got {response.get('error', {}).get('code')}"
        if op:
            assert response.get("op") == op, f"Expected op={op}, got {response.get('op')}"
        return response.get("error", {})


@pytest.fixture
def assertions():
    """Fixture providing response assertion helpers."""
    return ResponseAssertions()


@pytest.fixture
def mock_sheets_client():
    """
    Mock SheetsClient for unit tests.
    Returns a MagicMock that can be configured per test.
    """
    mock = MagicMock()
    mock.get_all_values.return_value = []
    mock.get_range.return_value = []
    mock.update_range.return_value = None
    return mock


@pytest.fixture
def sample_matrix():
    """Small 2x2 matrix"""
    return [["a", "b"], ["c", "d"]]


@pytest.fixture
def sample_sheet_values():
    """Ragged sheet values as the Sheets API returns them (trailing blanks dropped)"""
    return [
        ["ID", "Name", "Grade", "Status"],
        ["S001", "Alice", "10", "active"],
        ["S002", "Bob", "11"],
        ["S003", "Carol", "10", "inactive"],
        [],
        ["S004", "Dave", 10, "active"],
    ]
