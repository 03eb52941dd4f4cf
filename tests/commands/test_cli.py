"""Tests for the Typer CLI (`schemas`, `validate`, `doctor`)."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from cli import doctor
from cli.main import app
from core.config import _parse_env_lines

runner = CliRunner()


@pytest.fixture
def payload_file(tmp_path):
    def _write(data) -> str:
        path = tmp_path / "payload.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


def test_schemas_lists_registry() -> None:
    result = runner.invoke(app, ["schemas", "--quiet"])

    assert result.exit_code == 0
    assert "APIPetResponseSchema" in result.output


def test_schemas_describes_rules_without_suffix() -> None:
    result = runner.invoke(app, ["schemas", "APIFileUploadResponse", "-q"])

    assert result.exit_code == 0
    assert "fileId" in result.output
    assert "file_id" in result.output


def test_unknown_schema_is_a_usage_error() -> None:
    result = runner.invoke(app, ["schemas", "Nope", "-q"])

    assert result.exit_code == 2


def test_validate_prints_domain_shape(payload_file) -> None:
    path = payload_file({"file_id": "f-1", "url": "https://cdn.test/f-1"})

    result = runner.invoke(app, ["validate", "APIFileUploadResponse", path])

    assert result.exit_code == 0
    assert '"fileId": "f-1"' in result.output


def test_validate_reports_errors_with_exit_code(payload_file) -> None:
    path = payload_file({"url": 3})

    result = runner.invoke(app, ["validate", "APIFileUploadResponseSchema", path])

    assert result.exit_code == 1
    assert "Validation failed" in result.output
    assert "file_id" in result.output


def test_validate_domain_input(payload_file) -> None:
    path = payload_file({"fileId": "f-2", "url": "u"})

    result = runner.invoke(app, ["validate", "APIFileUploadResponse", path, "--domain"])

    assert result.exit_code == 0
    assert '"fileId": "f-2"' in result.output


def test_doctor_run_shows_configuration(monkeypatch) -> None:
    async def fake_check(url: str, timeout_seconds: float):
        return True, f"HTTP 200 from {url}"

    monkeypatch.setattr(doctor, "_check_http", fake_check)
    monkeypatch.setenv("TYPESYNC_BASE_URL", "https://doctor.test/")
    monkeypatch.setenv("TYPESYNC_RETRIES", "2")

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "https://doctor.test" in result.output
    assert "2 retries" in result.output
    assert "HTTP 200" in result.output


def test_doctor_setup_writes_user_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))

    result = runner.invoke(app, ["doctor", "setup"], input="https://setup.test\nsecret\n")

    assert result.exit_code == 0
    env_files = list(tmp_path.rglob(".env"))
    assert len(env_files) == 1
    assert _parse_env_lines(env_files[0].read_text(encoding="utf-8")) == {
        "TYPESYNC_AUTH_TOKEN": "secret",
        "TYPESYNC_BASE_URL": "https://setup.test",
    }


def test_doctor_setup_empty_token_clears_stored_one(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    runner.invoke(app, ["doctor", "setup"], input="https://setup.test\nsecret\n")

    result = runner.invoke(app, ["doctor", "setup"], input="https://other.test\n\n")

    assert result.exit_code == 0
    (env_file,) = tmp_path.rglob(".env")
    assert _parse_env_lines(env_file.read_text(encoding="utf-8")) == {
        "TYPESYNC_BASE_URL": "https://other.test",
    }
