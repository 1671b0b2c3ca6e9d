"""Invoices, recurring invoices and the request bodies around them."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import AwareDatetime, Field

from freeagent_domain.core.dates import format_date
from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import OptionalEcStatus, OptionalSalesTaxStatus


class PaymentMethods(FreeAgentModel):
    """Online payment options offered on an invoice."""

    omit_when_none = True

    paypal: Flag | None = None
    gocardless_preauth: Flag | None = None
    gocardless_instant_bank_pay: Flag | None = None
    stripe: Flag | None = None
    tyl: Flag | None = None


class InvoiceItem(FreeAgentModel):
    omit_when_none = True

    url: ResourceUrl | None = None
    position: int | None = None
    description: str | None = None
    item_type: str | None = Field(
        default=None,
        description="Hours, Days, Products, Services, ... o '-no unit-'.",
    )
    quantity: Money | None = None
    price: Money | None = None
    sales_tax_rate: Money | None = None
    sales_tax_value: Money | None = None
    sales_tax_status: OptionalSalesTaxStatus = None
    second_sales_tax_rate: Money | None = None
    category: ResourceUrl | None = None
    project: ResourceUrl | None = None
    subtotal: Money | None = None
    total: Money | None = None
    stock_item: ResourceUrl | None = None


class Invoice(FreeAgentModel):
    """A sales invoice with its line items."""

    omit_when_none = True

    url: ResourceUrl | None = None
    contact: ResourceUrl | None = None
    project: ResourceUrl | None = None
    reference: str | None = None
    dated_on: date | None = None
    due_on: date | None = None
    paid_on: date | None = None
    status: str | None = None
    currency: str | None = None
    exchange_rate: Money | None = None
    net_value: Money | None = None
    total_value: Money | None = None
    paid_value: Money | None = None
    due_value: Money | None = None
    discount: Money | None = None
    discount_percent: Money | None = None
    payment_terms_in_days: int | None = None
    payment_terms: str | None = None
    comments: str | None = None
    notes: str | None = None
    omit_header: Flag | None = None
    always_show_bic_and_iban: Flag | None = None
    send_thank_you_emails: Flag | None = None
    send_reminder_emails: Flag | None = None
    send_new_invoice_emails: Flag | None = None
    bank_account: ResourceUrl | None = None
    recurring_invoice: ResourceUrl | None = None
    invoice_items: tuple[InvoiceItem, ...] | None = None
    payment_methods: PaymentMethods | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    sent_at: datetime | None = None
    reminders_sent: tuple[datetime, ...] | None = None
    written_off_date: date | None = None
    involves_sales_tax: Flag | None = None


class RecurringInvoice(FreeAgentModel):
    """Template FreeAgent uses to raise invoices on a schedule."""

    omit_when_none = True

    url: ResourceUrl | None = None
    contact: ResourceUrl | None = None
    project: ResourceUrl | None = None
    contact_name: str | None = None
    client_contact_name: str | None = None
    dated_on: date | None = None
    frequency: str | None = None
    recurring_starts_on: date | None = None
    recurring_end_date: date | None = None
    next_recurs_on: date | None = None
    profile_name: str | None = None
    reference: str | None = None
    po_reference: str | None = None
    currency: str | None = None
    exchange_rate: Money | None = None
    discount_percent: Money | None = None
    net_value: Money | None = None
    sales_tax_value: Money | None = None
    second_sales_tax_value: Money | None = None
    total_value: Money | None = None
    involves_sales_tax: Flag | None = None
    recurring_status: str | None = None
    omit_header: Flag | None = None
    show_project_name: Flag | None = None
    always_show_bic_and_iban: Flag | None = None
    payment_methods: PaymentMethods | None = None
    payment_terms_in_days: int | None = None
    bank_account: ResourceUrl | None = None
    ec_status: OptionalEcStatus = None
    place_of_supply: str | None = None
    cis_rate: str | None = None
    cis_deduction_rate: Money | None = None
    send_new_invoice_emails: Flag | None = None
    send_reminder_emails: Flag | None = None
    send_thank_you_emails: Flag | None = None
    invoice_items: tuple[InvoiceItem, ...] | None = None
    comments: str | None = None
    property: ResourceUrl | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None


class InvoiceTimelineEntry(FreeAgentModel):
    omit_when_none = True

    reference: str | None = None
    summary: str | None = None
    description: str | None = None
    dated_on: date | None = None
    amount: Money | None = None


class EmailAttachment(FreeAgentModel):
    """Base64 attachment sent along an invoice/estimate/credit note email."""

    file_name: str | None = None
    content_type: str | None = None
    data: str | None = None


class InvoiceEmail(FreeAgentModel):
    omit_when_none = True

    to: str | None = None
    from_: str | None = Field(default=None, alias="from")
    cc: str | None = None
    bcc: str | None = None
    subject: str | None = None
    body: str | None = None
    use_template: Flag | None = None
    email_to_sender: Flag | None = None
    attach_expense_receipts: Flag | None = None
    attachments: tuple[EmailAttachment, ...] | None = None


class InvoiceEmailWrapper(FreeAgentModel):
    email: InvoiceEmail | None = None


class InvoicePayment(FreeAgentModel):
    """Body for marking an invoice as paid."""

    paid_on: str | None = None
    paid_into_bank_account: str | None = None

    @classmethod
    def on(cls, paid_on: date, bank_account: str) -> InvoicePayment:
        return cls(paid_on=format_date(paid_on), paid_into_bank_account=str(bank_account))


class InvoicePdf(FreeAgentModel):
    content: str | None = Field(default=None, description="PDF en base64.")


class InvoiceDefaultAdditionalText(FreeAgentModel):
    text: str | None = None
