"""Bills (purchase invoices) and their items."""

from __future__ import annotations

from datetime import date

from pydantic import AwareDatetime, Field

from freeagent_domain.core.dates import format_date
from freeagent_domain.core.domain.attachments import Attachment
from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Many, Money, ResourceUrl
from freeagent_domain.core.domain.enums import OptionalEcStatus, OptionalRebillType, OptionalSalesTaxStatus


class BillItem(FreeAgentModel):
    """A bill line; `_destroy=1` removes it on update."""

    omit_when_none = True

    url: ResourceUrl | None = None
    bill: ResourceUrl | None = None
    category: ResourceUrl | None = None
    description: str | None = None
    total_value: Money | None = None
    total_value_ex_tax: Money | None = None
    quantity: Money | None = None
    unit: str | None = None
    sales_tax_rate: Money | None = None
    sales_tax_value: Money | None = None
    sales_tax_status: OptionalSalesTaxStatus = None
    second_sales_tax_rate: Money | None = None
    second_sales_tax_value: Money | None = None
    second_sales_tax_status: OptionalSalesTaxStatus = None
    manual_sales_tax_amount: Money | None = None
    stock_item: ResourceUrl | None = None
    stock_item_description: str | None = None
    stock_altering_quantity: Money | None = None
    capital_asset: ResourceUrl | None = None
    depreciation_schedule: str | None = None
    project: ResourceUrl | None = None
    cis_deduction_rate: Money | None = None
    destroy: int | None = Field(default=None, alias="_destroy")


class BillAttachment(FreeAgentModel):
    """Receipt uploaded together with a new bill (base64 `data`)."""

    omit_when_none = True

    data: str | None = None
    file_name: str | None = None
    content_type: str | None = None
    description: str | None = None


class Bill(FreeAgentModel):
    """A supplier bill.

    `bill_items` is never null: an absent list decodes as empty and is
    written as `[]`.
    """

    omit_when_none = frozenset(
        {
            "url",
            "contact",
            "project",
            "property",
            "reference",
            "dated_on",
            "due_on",
            "paid_on",
            "status",
            "long_status",
            "total_value",
            "due_value",
            "native_due_value",
            "net_value",
            "sales_tax_value",
            "second_sales_tax_value",
            "ec_status",
            "paid_value",
            "input_total_values_inc_tax",
            "rebill_type",
            "rebill_factor",
            "rebill_to_project",
            "rebilled_on_invoice_item",
            "comments",
            "currency",
            "exchange_rate",
            "is_paid_by_hire_purchase",
            "recurring_bill",
            "recurring",
            "recurring_end_date",
            "attachment",
            "cis_deduction_band",
            "cis_deduction_rate",
            "cis_deduction",
            "cis_deduction_suffered",
            "created_at",
            "updated_at",
        }
    )

    url: ResourceUrl | None = None
    contact: ResourceUrl | None = None
    project: ResourceUrl | None = None
    property: ResourceUrl | None = None
    reference: str | None = None
    dated_on: date | None = None
    due_on: date | None = None
    paid_on: date | None = None
    status: str | None = None
    long_status: str | None = None
    total_value: Money | None = None
    due_value: Money | None = None
    native_due_value: Money | None = None
    net_value: Money | None = None
    sales_tax_value: Money | None = None
    second_sales_tax_value: Money | None = None
    ec_status: OptionalEcStatus = None
    paid_value: Money | None = None
    input_total_values_inc_tax: Flag | None = None
    rebill_type: OptionalRebillType = None
    rebill_factor: Money | None = None
    rebill_to_project: ResourceUrl | None = None
    rebilled_on_invoice_item: ResourceUrl | None = None
    comments: str | None = None
    currency: str | None = None
    exchange_rate: Money | None = None
    is_paid_by_hire_purchase: Flag | None = None
    recurring_bill: ResourceUrl | None = None
    recurring: str | None = None
    recurring_end_date: date | None = None
    attachment: Attachment | None = None
    cis_deduction_band: str | None = None
    cis_deduction_rate: Money | None = None
    cis_deduction: Money | None = None
    cis_deduction_suffered: Money | None = None
    bill_items: Many[BillItem] = ()
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None


class BillPayment(FreeAgentModel):
    """Body for marking a bill as paid from a bank account."""

    paid_on: str | None = None
    bank_account: str | None = None

    @classmethod
    def on(cls, paid_on: date, bank_account: str) -> BillPayment:
        return cls(paid_on=format_date(paid_on), bank_account=str(bank_account))
