"""
Environment variable loader for the matrix toolkit.
Handles loading credentials and sheet defaults from .env file or environment.
"""
import os
import json
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv

from config import DEFAULT_SHEET_NAME


# Find .env file (look in current dir and parent dirs)
def _find_env_file() -> Path | None:
    current = Path(__file__).parent
    for _ in range(3):  # Check up to 3 levels up
        env_path = current / ".env"
        if env_path.exists():
            return env_path
        current = current.parent
    return None

_env_file = _find_env_file()
if _env_file:
    load_dotenv(_env_file)


def get_google_credentials() -> dict:
    """
    Get Google Service Account credentials.

    Priority:
    1. GOOGLE_CREDENTIALS_FILE (path to JSON file)
    2. GOOGLE_CREDENTIALS_JSON (JSON string content)

    Returns:
        dict: Parsed credentials dictionary

    Raises:
        RuntimeError: If no credentials are configured
    """
    creds_file = os.environ.get("GOOGLE_CREDENTIALS_FILE")
    if creds_file:
        creds_path = Path(creds_file)
        if not creds_path.exists():
            raise RuntimeError(f"GOOGLE_CREDENTIALS_FILE not found: {creds_file}")
        with open(creds_path, "r") as f:
            return json.load(f)

    creds_json = os.environ.get("GOOGLE_CREDENTIALS_JSON")
    if creds_json:
        try:
            return json.loads(creds_json)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Invalid GOOGLE_CREDENTIALS_JSON: {e}")

    raise RuntimeError(
        "No Google credentials configured. "
        "Set GOOGLE_CREDENTIALS_FILE or GOOGLE_CREDENTIALS_JSON in .env"
    )


def get_default_spreadsheet_id() -> str | None:
    """Get the spreadsheet handlers open when no file_id is passed."""
    sid = os.environ.get("MATRIX_SPREADSHEET_ID")
    return sid if sid else None


def get_default_sheet_name() -> str:
    """Get the worksheet handlers open when no sheet_name is passed."""
    return os.environ.get("MATRIX_SHEET_NAME") or DEFAULT_SHEET_NAME
