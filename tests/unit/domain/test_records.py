"""Tests for record behaviour: omit rules, unknown fields, decimals, immutability."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from freeagent_domain.core.domain import (
    Bill,
    BillPayment,
    CapitalAsset,
    Contact,
    Currency,
    Estimate,
    ExpenseAttachment,
    InvoiceEmail,
    InvoicePayment,
    JournalEntry,
    JournalSet,
    MileageSettings,
    Project,
    SelfAssessmentReturnFiling,
    Timeslip,
    TrialBalance,
    VatReturnFiling,
    Webhook,
)
from freeagent_domain.core.domain.credit_notes import CreditNoteRefund

API = "https://api.freeagent.com/v2"


def _dump(record) -> dict:
    return record.model_dump(mode="json", by_alias=True)


class TestUnknownFields:
    """Extra JSON keys are ignored."""

    def test_unknown_keys_do_not_fail_or_leak(self) -> None:
        """A payload with keys the record does not know decodes and re-encodes without them."""
        contact = Contact.model_validate({"first_name": "Ada", "favourite_colour": "green"})

        assert contact.first_name == "Ada"
        assert "favourite_colour" not in _dump(contact)

    def test_keys_are_case_sensitive(self) -> None:
        """'First_Name' is an unknown key, not first_name."""
        assert Contact.model_validate({"First_Name": "Ada"}).first_name is None


class TestOmitRules:
    """Absent values are dropped or emitted as null per record."""

    def test_omit_all_record_drops_absent(self) -> None:
        """Contact drops every absent attribute."""
        assert _dump(Contact(first_name="Ada")) == {"first_name": "Ada"}

    def test_never_omit_record_emits_null(self) -> None:
        """Currency keeps absent attributes as null."""
        assert _dump(Currency(code="GBP")) == {"code": "GBP", "name": None, "symbol": None}

    def test_partial_omit_set(self) -> None:
        """Timeslip only drops `comment`; other absent keys stay as null."""
        absent = _dump(Timeslip())
        present = _dump(Timeslip(comment="Standup"))

        assert "comment" not in absent
        assert absent["hours"] is None
        assert present["comment"] == "Standup"

    def test_empty_item_list_is_written(self) -> None:
        """An empty item list encodes as [] and a non-empty one keeps its items."""
        empty = Estimate()
        with_items = Estimate.model_validate({"estimate_items": [{"description": "Design"}]})

        assert _dump(empty)["estimate_items"] == []
        assert _dump(Bill(reference="B1"))["bill_items"] == []
        assert _dump(JournalSet(description="x"))["journal_entries"] == []
        assert _dump(with_items)["estimate_items"][0]["description"] == "Design"

    def test_null_item_list_decodes_as_empty(self) -> None:
        """An explicit null never leaves a None collection behind."""
        assert JournalSet.model_validate({"description": "x", "journal_entries": None}).journal_entries == ()

    def test_from_alias_is_emitted(self) -> None:
        """InvoiceEmail writes the `from` key."""
        email = InvoiceEmail(to="a@example.com", from_="b@example.com")

        assert _dump(email) == {"to": "a@example.com", "from": "b@example.com"}
        assert InvoiceEmail.model_validate({"from": "b@example.com"}).from_ == "b@example.com"


class TestDecimals:
    """Money never goes through binary float."""

    def test_decimal_string_keeps_precision(self) -> None:
        """'1234.56' re-encodes as exactly '1234.56'."""
        project = Project.model_validate(
            {
                "contact": f"{API}/contacts/1",
                "name": "Site",
                "status": "Active",
                "uses_project_invoice_sequence": True,
                "currency": "GBP",
                "budget": "1234.56",
            }
        )

        assert project.budget == Decimal("1234.56")
        assert _dump(project)["budget"] == "1234.56"

    def test_non_numeric_string_fails(self) -> None:
        """'lots' is not a decimal; the layer does not coerce."""
        with pytest.raises(ValidationError) as excinfo:
            TrialBalance.model_validate({"total_debit": "lots"})

        assert excinfo.value.errors()[0]["loc"] == ("total_debit",)


class TestImmutability:
    """Records are frozen values; updates return copies."""

    def test_assignment_is_rejected(self) -> None:
        """Setting an attribute raises."""
        contact = Contact(first_name="Ada")

        with pytest.raises(ValidationError):
            contact.first_name = "Grace"

    def test_with_changes_returns_new_validated_copy(self) -> None:
        """with_changes leaves the original untouched and validates the new value."""
        contact = Contact(first_name="Ada")
        renamed = contact.with_changes(first_name="Grace")

        assert contact.first_name == "Ada"
        assert renamed.first_name == "Grace"
        with pytest.raises(ValidationError):
            contact.with_changes(default_payment_terms_in_days="soon")


class TestRequestBuilders:
    """Request bodies format their dates as yyyy-MM-dd."""

    def test_payment_builders(self) -> None:
        """Invoice/bill payments and credit note refunds carry the API date string."""
        day = date(2024, 1, 5)
        account = f"{API}/bank_accounts/1"

        assert _dump(InvoicePayment.on(day, account)) == {
            "paid_on": "2024-01-05",
            "paid_into_bank_account": account,
        }
        assert BillPayment.on(day, account).paid_on == "2024-01-05"
        assert CreditNoteRefund.on(day, account).refunded_on == "2024-01-05"

    def test_filing_builders(self) -> None:
        """Filings carry the date string and the online flag."""
        vat = VatReturnFiling.filed(date(2024, 5, 7), online=True, hmrc_reference="ABC123")
        sa = SelfAssessmentReturnFiling.filed(date(2025, 1, 31), utr_number="1234567890")

        assert _dump(vat) == {"filed_on": "2024-05-07", "filed_online": True, "hmrc_reference": "ABC123"}
        assert sa.filed_online is False
        assert sa.utr_number == "1234567890"


class TestRecordHelpers:
    """Small derived values on records."""

    def test_contact_display_name(self) -> None:
        """Organisation name wins over the person's name."""
        assert Contact(first_name="Ada", last_name="Lovelace").display_name() == "Ada Lovelace"
        assert Contact(first_name="Ada", organisation_name="Engines").display_name() == "Engines"
        assert Contact().display_name() == ""

    def test_journal_set_total_debit(self) -> None:
        """Debits and credits sum exactly."""
        journal = JournalSet(
            description="Adjust",
            journal_entries=(
                JournalEntry(category=f"{API}/categories/250", debit_value="10.10", description="a"),
                JournalEntry(category=f"{API}/categories/001", debit_value="-10.10", description="b"),
            ),
        )

        assert journal.total_debit() == Decimal("0.00")

    def test_trial_balance_is_balanced(self) -> None:
        """Equal totals balance; missing totals do not."""
        assert TrialBalance(total_debit=Decimal("5"), total_credit=Decimal("5.00")).is_balanced()
        assert not TrialBalance().is_balanced()

    def test_mileage_rates_on(self) -> None:
        """The option whose range covers the day is returned."""
        settings = MileageSettings.model_validate(
            {
                "mileage_rates": [
                    {"from": "2011-04-06", "to": "2023-04-05", "value": {"basic_rate_limit": 10000}},
                    {"from": "2023-04-06", "to": None, "value": {"basic_rate_limit": 12000}},
                ]
            }
        )

        assert settings.rates_on(date(2020, 1, 1)).basic_rate_limit == 10000
        assert settings.rates_on(date(2024, 1, 1)).basic_rate_limit == 12000
        assert settings.rates_on(date(2000, 1, 1)) is None

    def test_misc_predicates(self) -> None:
        """Webhook events, asset disposal and receipt content types."""
        assert Webhook(events=("invoice.created",)).subscribes_to("invoice.created")
        assert not Webhook().subscribes_to("invoice.created")
        assert CapitalAsset(disposed_on=date(2024, 1, 1)).is_disposed()
        assert ExpenseAttachment(content_type="image/png").has_supported_content_type()
        assert not ExpenseAttachment(content_type="text/plain").has_supported_content_type()
