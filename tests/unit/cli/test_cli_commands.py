"""Tests for the freeagent-domain CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from freeagent_domain.cli.main import app
from freeagent_domain.core.config import get_user_env_file

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("isolated_env")


class TestValidate:
    """validate ENVELOPE PATH."""

    def test_valid_file_prints_summary(self, contacts_file: Path) -> None:
        """A good file exits 0 and shows the envelope table."""
        result = runner.invoke(app, ["validate", "ContactsRoot", str(contacts_file)])

        assert result.exit_code == 0, result.output
        assert "ContactsRoot" in result.output
        assert "2 record(s)" in result.output

    def test_json_output(self, contacts_file: Path) -> None:
        """--json prints the normalized payload."""
        result = runner.invoke(app, ["validate", "contacts_root", str(contacts_file), "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [c["first_name"] for c in payload["contacts"]] == ["Ada", "Charles"]
        assert payload["contacts"][0]["created_at"] == "2024-01-05T09:30:00Z"

    def test_output_file(self, contacts_file: Path, tmp_path: Path) -> None:
        """--output writes the normalized JSON to disk."""
        target = tmp_path / "normalized.json"

        result = runner.invoke(app, ["validate", "ContactsRoot", str(contacts_file), "-o", str(target)])

        assert result.exit_code == 0, result.output
        assert len(json.loads(target.read_text(encoding="utf-8"))["contacts"]) == 2

    def test_decode_error_exits_1(self, tmp_path: Path) -> None:
        """An unknown literal shows the error panel and exits 1."""
        bad = tmp_path / "company.json"
        bad.write_text('{"company": {"sales_tax_registration_status": "Bogus"}}', encoding="utf-8")

        result = runner.invoke(app, ["validate", "CompanyRoot", str(bad)])

        assert result.exit_code == 1
        assert "UnknownEnumLiteralError" in result.output
        assert "Bogus" in result.output

    def test_unknown_envelope_is_usage_error(self, contacts_file: Path) -> None:
        """An envelope name that does not exist is a bad parameter."""
        result = runner.invoke(app, ["validate", "NopeRoot", str(contacts_file)])

        assert result.exit_code == 2


class TestSmallCommands:
    """envelopes, date and the global options."""

    def test_envelopes_lists_roots(self) -> None:
        """Every root record is listed."""
        result = runner.invoke(app, ["envelopes", "--no-banner"])

        assert result.exit_code == 0, result.output
        assert "ContactsRoot" in result.output
        assert "PayrollYearRoot" in result.output

    def test_date(self) -> None:
        """date prints the API date string."""
        result = runner.invoke(app, ["date", "2024-01-05"])

        assert result.exit_code == 0
        assert result.output.strip() == "2024-01-05"

    def test_bad_date(self) -> None:
        """Non-ISO input is rejected."""
        assert runner.invoke(app, ["date", "05/01/2024"]).exit_code == 2

    def test_bad_log_level(self) -> None:
        """An unknown log level is rejected before any command runs."""
        assert runner.invoke(app, ["--log-level", "LOUD", "date", "2024-01-05"]).exit_code == 2


class TestDoctor:
    """doctor and doctor setup."""

    def test_doctor_reports_missing_credentials(self) -> None:
        """Without credentials the table says MISSING and the note lists them."""
        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0, result.output
        assert "MISSING" in result.output
        assert "ClientId is required" in result.output

    def test_doctor_does_not_print_secrets(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Credentials show as OK, never their value."""
        monkeypatch.setenv("FREEAGENT_CLIENT_ID", "id-123")
        monkeypatch.setenv("FREEAGENT_CLIENT_SECRET", "s3cr3t")
        monkeypatch.setenv("FREEAGENT_REFRESH_TOKEN", "tok")

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0, result.output
        assert "s3cr3t" not in result.output
        assert "MISSING" not in result.output

    def test_setup_writes_user_env(self) -> None:
        """setup stores the answers in the user .env."""
        result = runner.invoke(app, ["doctor", "setup"], input="y\nmy-id\nmy-secret\nmy-token\n")

        assert result.exit_code == 0, result.output
        content = get_user_env_file().read_text(encoding="utf-8")
        assert "FREEAGENT_CLIENT_ID=my-id" in content
        assert "FREEAGENT_USE_SANDBOX=true" in content
