"""Test configuration and shared fixtures."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import structlog


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with no FREEAGENT_* variables, an empty cwd and a private user config dir."""

    for key in list(os.environ):
        if key.upper().startswith("FREEAGENT_"):
            monkeypatch.delenv(key, raising=False)
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("APPDATA", str(config_home))
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def contact_payload() -> dict:
    return {
        "url": "https://api.freeagent.com/v2/contacts/17",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "organisation_name": "Analytical Engines Ltd",
        "email": "ada@example.com",
        "country": "United Kingdom",
        "charge_sales_tax": "Auto",
        "account_balance": "-120.50",
        "contact_name_on_invoices": True,
        "default_payment_terms_in_days": 30,
        "created_at": "2024-01-05T09:30:00Z",
        "updated_at": "2024-02-01T17:00:00+01:00",
    }


@pytest.fixture
def contacts_file(tmp_path: Path, contact_payload: dict) -> Path:
    second = {"url": "https://api.freeagent.com/v2/contacts/18", "first_name": "Charles"}
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps({"contacts": [contact_payload, second]}), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI configures structlog globally; start every test from the defaults."""

    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
