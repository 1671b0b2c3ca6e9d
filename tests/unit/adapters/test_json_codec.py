"""Tests for the JSON codec and its error translation."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from freeagent_domain.adapters.json_codec import decode, dumps, encode, loads, parse_json
from freeagent_domain.core.domain import Company, Contact, Invoice, Project, TrialBalance
from freeagent_domain.core.domain.roots import CompanyRoot, ContactsRoot
from freeagent_domain.core.errors import (
    FreeAgentDomainError,
    MissingFieldError,
    PayloadDecodeError,
    UnknownEnumLiteralError,
)


class TestLoads:
    """Text to records."""

    def test_contacts_envelope(self, contact_payload: dict) -> None:
        """A contacts list decodes in order."""
        text = json.dumps({"contacts": [contact_payload, {"first_name": "Charles"}]})

        root = loads(ContactsRoot, text)

        assert [c.first_name for c in root.contacts] == ["Ada", "Charles"]

    def test_json_numbers_become_decimals(self) -> None:
        """A bare JSON number never passes through float."""
        balance = loads(TrialBalance, '{"total_debit": 1234.56, "total_credit": 0.1}')

        assert balance.total_debit == Decimal("1234.56")
        assert balance.total_credit == Decimal("0.1")
        assert encode(balance)["total_debit"] == "1234.56"

    def test_bytes_are_accepted(self) -> None:
        """UTF-8 bytes decode like text."""
        assert loads(Contact, '{"first_name": "Zoë"}'.encode()).first_name == "Zoë"

    def test_parse_json_uses_decimal(self) -> None:
        """parse_json returns Decimal for fractional numbers."""
        assert parse_json("[1.10]") == [Decimal("1.10")]


class TestErrorTaxonomy:
    """pydantic errors become domain errors with resource, field and value."""

    def test_unknown_enum_literal(self) -> None:
        """'Bogus' raises UnknownEnumLiteralError naming field, literal and enum."""
        with pytest.raises(UnknownEnumLiteralError) as excinfo:
            loads(CompanyRoot, '{"company": {"sales_tax_registration_status": "Bogus"}}')

        error = excinfo.value
        assert error.field == "sales_tax_registration_status"
        assert error.literal == "Bogus"
        assert error.enum_name == "SalesTaxRegistrationStatus"
        assert error.resource == "CompanyRoot"
        assert error.fields == ("company.sales_tax_registration_status",)
        assert "Bogus" in str(error)

    def test_missing_required_field(self) -> None:
        """A Project without a name names the missing field."""
        payload = {
            "contact": "https://api.freeagent.com/v2/contacts/1",
            "status": "Active",
            "uses_project_invoice_sequence": False,
            "currency": "GBP",
            "budget": "0",
        }

        with pytest.raises(MissingFieldError) as excinfo:
            decode(Project, payload)

        assert excinfo.value.details["missing"] == ["name"]
        assert excinfo.value.issues[0].value is None

    def test_type_mismatch_carries_value(self) -> None:
        """A non-numeric decimal is a PayloadDecodeError with the offending value."""
        with pytest.raises(PayloadDecodeError) as excinfo:
            decode(TrialBalance, {"total_debit": "lots"})

        issue = excinfo.value.issues[0]
        assert type(excinfo.value) is PayloadDecodeError
        assert issue.path == "total_debit"
        assert issue.value == "lots"

    @pytest.mark.parametrize("flag", ["yes", "1", 1, "on"])
    def test_boolean_is_not_coerced(self, flag: object) -> None:
        """A boolean field only accepts JSON true or false."""
        with pytest.raises(PayloadDecodeError) as excinfo:
            decode(Invoice, {"send_reminder_emails": flag})

        assert excinfo.value.issues[0].path == "send_reminder_emails"
        assert excinfo.value.issues[0].value == flag

    def test_boolean_literals_decode(self) -> None:
        """true and false still decode."""
        invoice = decode(Invoice, {"send_reminder_emails": True, "omit_header": False})

        assert invoice.send_reminder_emails is True
        assert invoice.omit_header is False

    def test_invalid_json(self) -> None:
        """Malformed text is a decode error with position details."""
        with pytest.raises(PayloadDecodeError) as excinfo:
            loads(Contact, '{"first_name": ')

        assert excinfo.value.issues[0].kind == "json_invalid"
        assert "line" in excinfo.value.details

    def test_non_object_payload(self) -> None:
        """A JSON array is not a record."""
        with pytest.raises(PayloadDecodeError, match="expected a JSON object"):
            loads(Contact, "[]")

    def test_all_errors_share_a_base(self) -> None:
        """Callers can catch FreeAgentDomainError for every failure."""
        assert issubclass(UnknownEnumLiteralError, FreeAgentDomainError)
        assert issubclass(MissingFieldError, PayloadDecodeError)


class TestLogging:
    """Failures are logged without payload contents."""

    def test_decode_failure_is_logged(self) -> None:
        """codec.decode_failed names the resource and error type."""
        with capture_logs() as logs:
            with pytest.raises(PayloadDecodeError):
                decode(Company, {"type": "NotACompanyType", "name": "secret-name"})

        event = next(e for e in logs if e["event"] == "codec.decode_failed")
        assert event["resource"] == "Company"
        assert event["error_type"] == "UnknownEnumLiteralError"
        assert "secret-name" not in repr(event)


class TestDumps:
    """Records to text."""

    def test_dumps_uses_wire_keys_and_omits_absent(self) -> None:
        """Contact encodes only what is set, with wire keys."""
        assert json.loads(dumps(Contact(first_name="Ada"))) == {"first_name": "Ada"}

    def test_dumps_indent_and_sort(self) -> None:
        """indent and sort_keys are passed through."""
        text = dumps(Contact(last_name="L", first_name="F"), indent=2, sort_keys=True)

        assert text.splitlines()[1].strip() == '"first_name": "F",'
