"""Categories, journals, opening balances, accounting transactions and stock."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import AwareDatetime, Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Many, Money, ResourceUrl
from freeagent_domain.core.domain.banking import BankAccountOpeningBalance
from freeagent_domain.core.domain.enums import CategoryGroupTypeValue, OptionalAutoSalesTaxRateType


class Category(FreeAgentModel):
    """An accounting category (chart of accounts entry)."""

    omit_when_none = True

    url: ResourceUrl | None = None
    nominal_code: str | None = None
    description: str | None = None
    category_type: str | None = None
    tax_reporting_name: str | None = None
    auto_sales_tax_rate: OptionalAutoSalesTaxRateType = None


class CategoryCreateRequest(FreeAgentModel):
    """Body for creating a custom category.

    Las reglas de negocio (rango de nominal code por grupo, campos
    obligatorios según el grupo) viven en `validation`, no aquí: el decode
    solo exige forma.
    """

    omit_when_none = frozenset({"tax_reporting_name", "auto_sales_tax_rate", "allowable_for_tax"})

    nominal_code: str
    description: str
    category_group: CategoryGroupTypeValue
    tax_reporting_name: str | None = None
    auto_sales_tax_rate: OptionalAutoSalesTaxRateType = None
    allowable_for_tax: Flag | None = None


class CategoryUpdateRequest(FreeAgentModel):
    omit_when_none = frozenset({"tax_reporting_name", "auto_sales_tax_rate", "allowable_for_tax"})

    description: str
    tax_reporting_name: str | None = None
    auto_sales_tax_rate: OptionalAutoSalesTaxRateType = None
    allowable_for_tax: Flag | None = None


class JournalEntry(FreeAgentModel):
    """One debit (positive) or credit (negative) line of a journal set."""

    omit_when_none = frozenset({"url", "user"})

    category: str
    debit_value: str
    description: str
    url: str | None = None
    user: str | None = None


class StockItemOpeningBalance(FreeAgentModel):
    url: ResourceUrl | None = None
    description: str | None = None
    debit_value: Money | None = None


class JournalSet(FreeAgentModel):
    """A manual journal; entries must net to zero (enforced by FreeAgent)."""

    omit_when_none = frozenset({"url", "updated_at", "dated_on", "tag", "bank_accounts", "stock_items"})

    url: ResourceUrl | None = None
    updated_at: AwareDatetime | None = None
    dated_on: date | None = None
    description: str
    tag: str | None = None
    journal_entries: Many[JournalEntry] = ()
    bank_accounts: tuple[BankAccountOpeningBalance, ...] | None = None
    stock_items: tuple[StockItemOpeningBalance, ...] | None = None

    def total_debit(self) -> Money:
        """Sum of the entries' `debit_value` strings, as an exact decimal."""

        return sum((Money(entry.debit_value) for entry in self.journal_entries), Money(0))


class OpeningBalanceEntry(FreeAgentModel):
    category: ResourceUrl | None = None
    amount: Money | None = None
    description: str | None = None


class OpeningBalanceJournal(FreeAgentModel):
    dated_on: date | None = None
    description: str | None = None
    debit_entries: tuple[OpeningBalanceEntry, ...] | None = None
    credit_entries: tuple[OpeningBalanceEntry, ...] | None = None


class OpeningBalance(FreeAgentModel):
    url: ResourceUrl | None = None
    journal: OpeningBalanceJournal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ForeignCurrencyData(FreeAgentModel):
    omit_when_none = True

    currency_code: str | None = None
    debit_value: Money | None = None


class Transaction(FreeAgentModel):
    """A double-entry accounting transaction."""

    omit_when_none = True

    url: ResourceUrl | None = None
    dated_on: date | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
    description: str | None = None
    category: ResourceUrl | None = None
    category_name: str | None = None
    nominal_code: str | None = None
    debit_value: Money | None = None
    source_item_url: str | None = None
    foreign_currency_data: ForeignCurrencyData | None = None


class StockItem(FreeAgentModel):
    """A stock item; every field is mandatory in API responses."""

    url: ResourceUrl
    description: str
    opening_quantity: Money
    opening_balance: Money
    cost_of_sale_category: ResourceUrl
    stock_on_hand: Money
    created_at: AwareDatetime
    updated_at: AwareDatetime


class PriceListItem(FreeAgentModel):
    url: ResourceUrl | None = None
    code: str | None = None
    quantity: Money | None = None
    item_type: str | None = None
    description: str | None = None
    price: Money | None = None
    vat_status: str | None = Field(default=None, description="Estado de IVA del producto/servicio.")
    sales_tax_rate: Money | None = None
    second_sales_tax_rate: Money | None = None
    category: ResourceUrl | None = None
    stock_item: ResourceUrl | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
