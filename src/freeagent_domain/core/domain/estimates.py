"""Estimates (quotes) and their items."""

from __future__ import annotations

from pydantic import AwareDatetime, Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Many, Money, ResourceUrl
from freeagent_domain.core.domain.invoices import EmailAttachment


class EstimateItem(FreeAgentModel):
    omit_when_none = frozenset({"sales_tax_rate"})

    url: ResourceUrl | None = None
    position: int | None = None
    item_type: str | None = None
    quantity: Money | None = None
    price: Money | None = None
    description: str | None = None
    sales_tax_value: Money | None = None
    sales_tax_rate: Money | None = None
    category: ResourceUrl | None = None
    updated_at: AwareDatetime | None = None
    created_at: AwareDatetime | None = None


class Estimate(FreeAgentModel):
    """An estimate, quote or proposal sent to a contact.

    `estimate_items` is never null: an absent list decodes as empty and is
    written as `[]`.
    """

    omit_when_none = frozenset({"project", "sales_tax_value", "notes"})

    url: ResourceUrl | None = None
    project: ResourceUrl | None = None
    contact: ResourceUrl | None = None
    invoice: ResourceUrl | None = None
    reference: str | None = None
    discount_percent: Money | None = None
    estimate_type: str | None = Field(default=None, description="Estimate, Quote o Proposal.")
    dated_on: AwareDatetime | None = None
    status: str | None = None
    currency: str | None = None
    net_value: Money | None = None
    total_value: Money | None = None
    involves_sales_tax: Flag | None = None
    is_interim_uk_vat: Flag | None = None
    updated_at: AwareDatetime | None = None
    created_at: AwareDatetime | None = None
    sales_tax_value: str | None = None
    notes: str | None = None
    estimate_items: Many[EstimateItem] = ()


class EstimateEmail(FreeAgentModel):
    omit_when_none = True

    to: str | None = None
    from_: str | None = Field(default=None, alias="from")
    cc: str | None = None
    bcc: str | None = None
    subject: str | None = None
    body: str | None = None
    send_pdf_attachment: Flag | None = None
    use_template: Flag | None = None
    email_to_sender: Flag | None = None
    attachments: tuple[EmailAttachment, ...] | None = None


class EstimateEmailWrapper(FreeAgentModel):
    email: EstimateEmail | None = None


class EstimatePdf(FreeAgentModel):
    content: str | None = None


class EstimateDefaultAdditionalText(FreeAgentModel):
    text: str | None = None
