"""Credit notes, their reconciliations against invoices and refunds."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from freeagent_domain.core.dates import format_date
from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import OptionalSalesTaxStatus
from freeagent_domain.core.domain.invoices import InvoiceEmail


class CreditNoteItem(FreeAgentModel):
    """A credit note line; `_destroy=1` removes it on update."""

    omit_when_none = True

    url: ResourceUrl | None = None
    position: Money | None = None
    description: str | None = None
    quantity: Money | None = None
    price: Money | None = None
    sales_tax_rate: Money | None = None
    sales_tax_value: Money | None = None
    category: ResourceUrl | None = None
    item_type: str | None = None
    second_sales_tax_rate: Money | None = None
    sales_tax_status: OptionalSalesTaxStatus = None
    second_sales_tax_status: OptionalSalesTaxStatus = None
    suffers_cis_deduction: Flag | None = None
    stock_item: ResourceUrl | None = None
    project: ResourceUrl | None = None
    subtotal: Money | None = None
    total: Money | None = None
    id: int | None = None
    destroy: int | None = Field(default=None, alias="_destroy")


class CreditNote(FreeAgentModel):
    omit_when_none = True

    url: ResourceUrl | None = None
    contact: ResourceUrl | None = None
    invoice: ResourceUrl | None = None
    project: ResourceUrl | None = None
    reference: str | None = None
    dated_on: date | None = None
    refunded_on: date | None = None
    status: str | None = None
    currency: str | None = None
    exchange_rate: Money | None = None
    net_value: Money | None = None
    total_value: Money | None = None
    reason: str | None = None
    credit_note_items: tuple[CreditNoteItem, ...] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    sent_at: datetime | None = None


class CreditNoteReconciliation(FreeAgentModel):
    """Allocation of a credit note against an invoice."""

    omit_when_none = True

    url: ResourceUrl | None = None
    gross_value: Money | None = None
    dated_on: date | None = None
    currency: str | None = None
    exchange_rate: Money | None = None
    invoice: ResourceUrl | None = None
    credit_note: ResourceUrl | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreditNoteRefund(FreeAgentModel):
    """Body for marking a credit note as refunded."""

    refunded_on: str | None = None
    bank_account: str | None = None

    @classmethod
    def on(cls, refunded_on: date, bank_account: str) -> CreditNoteRefund:
        return cls(refunded_on=format_date(refunded_on), bank_account=str(bank_account))


class CreditNoteEmailWrapper(FreeAgentModel):
    email: InvoiceEmail | None = None


class CreditNotePdf(FreeAgentModel):
    content: str | None = None
