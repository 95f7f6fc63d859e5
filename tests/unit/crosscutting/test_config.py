"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from folder_dialog.crosscutting.config import Settings
from folder_dialog.domain.entities import FolderType

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(app_env="development")
    assert settings.api_base_url == "http://localhost:3000/api/v1"
    assert settings.folder_path_segment == "f"
    assert settings.default_folder_type == FolderType.TEMPLATE
    assert settings.is_test_env() is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://sign.example.com/api/")
    monkeypatch.setenv("REQUEST_TIMEOUT_S", "5")
    monkeypatch.setenv("DEFAULT_FOLDER_TYPE", "DOCUMENT")

    settings = Settings()

    assert settings.api_base_url == "https://sign.example.com/api"
    assert settings.request_timeout_s == 5.0
    assert settings.default_folder_type == FolderType.DOCUMENT


@pytest.mark.parametrize("env", ["test", "testing", "CI"])
def test_test_env_detection(env):
    assert Settings(app_env=env).is_test_env()


def test_production_detection():
    assert Settings(app_env=" Production ").is_production()


@pytest.mark.parametrize(
    "field, value",
    [
        ("api_base_url", "ftp://nope"),
        ("request_timeout_s", 0),
        ("folder_path_segment", ""),
        ("folder_path_segment", "a/b"),
    ],
)
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})
