"""Accounting reports: balance sheet, profit and loss, trial balance, cash flow, aged balances.

These are read-only payloads; every field is nullable and encodes as `null`
when absent.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from freeagent_domain.core.domain.base import FreeAgentModel, Money, ResourceUrl


class BalanceSheetEntry(FreeAgentModel):
    category_url: ResourceUrl | None = None
    category_description: str | None = None
    nominal_code: str | None = None
    value: Money | None = None


class BalanceSheetAccount(FreeAgentModel):
    name: str | None = None
    nominal_code: str | None = None
    total_debit_value: int | None = None


class AssetsSection(FreeAgentModel):
    accounts: tuple[BalanceSheetAccount, ...] | None = None


class CapitalAssetsSection(FreeAgentModel):
    accounts: tuple[BalanceSheetAccount, ...] | None = None
    net_book_value: int | None = None


class LiabilitiesSection(FreeAgentModel):
    accounts: tuple[BalanceSheetAccount, ...] | None = None


class OwnersEquitySection(FreeAgentModel):
    accounts: tuple[BalanceSheetAccount, ...] | None = None
    retained_profit: int | None = None


class BalanceSheet(FreeAgentModel):
    dated_on: date | None = None
    fixed_assets: Money | None = None
    current_assets: Money | None = None
    current_liabilities: Money | None = None
    net_current_assets: Money | None = None
    total_assets_less_current_liabilities: Money | None = None
    capital_and_reserves: Money | None = None
    fixed_asset_entries: tuple[BalanceSheetEntry, ...] | None = None
    current_asset_entries: tuple[BalanceSheetEntry, ...] | None = None
    current_liability_entries: tuple[BalanceSheetEntry, ...] | None = None
    capital_and_reserve_entries: tuple[BalanceSheetEntry, ...] | None = None


class ProfitAndLossEntry(FreeAgentModel):
    category_url: ResourceUrl | None = None
    category_description: str | None = None
    nominal_code: str | None = None
    value: Money | None = None
    percentage_of_turnover: Money | None = None


class ProfitAndLossDeduction(FreeAgentModel):
    title: str | None = None
    total: Money | None = None


class ProfitAndLoss(FreeAgentModel):
    """Profit and loss summary between `from_date` and `to_date`."""

    from_date: date | None = None
    to_date: date | None = None
    turnover: Money | None = None
    cost_of_sales: Money | None = None
    gross_profit: Money | None = None
    administrative_expenses: Money | None = None
    operating_profit: Money | None = None
    net_profit: Money | None = None
    income_entries: tuple[ProfitAndLossEntry, ...] | None = None
    cost_of_sales_entries: tuple[ProfitAndLossEntry, ...] | None = None
    administrative_expenses_entries: tuple[ProfitAndLossEntry, ...] | None = None


class TrialBalanceEntry(FreeAgentModel):
    category_url: ResourceUrl | None = None
    category_description: str | None = None
    nominal_code: str | None = None
    debit: Money | None = None
    credit: Money | None = None
    balance: Money | None = None


class TrialBalance(FreeAgentModel):
    dated_on: date | None = None
    entries: tuple[TrialBalanceEntry, ...] | None = None
    total_debit: Money | None = None
    total_credit: Money | None = None

    def is_balanced(self) -> bool:
        return self.total_debit is not None and self.total_debit == self.total_credit


class TrialBalanceSummaryEntry(FreeAgentModel):
    """Row of the trial balance summary; `bank_account`/`user` only on sub-accounts."""

    category: ResourceUrl
    nominal_code: str
    display_nominal_code: str
    name: str
    total: Money
    bank_account: ResourceUrl | None = None
    user: ResourceUrl | None = None


class CashFlowMonthly(FreeAgentModel):
    month: int | None = None
    year: int | None = None
    total: Money | None = None


class CashFlowDirection(FreeAgentModel):
    total: Money | None = None
    months: tuple[CashFlowMonthly, ...] | None = None


class CashFlowItem(FreeAgentModel):
    description: str | None = None
    value: Money | None = None
    dated_on: date | None = None


class CashFlow(FreeAgentModel):
    """Incoming/outgoing cash summary; `from`/`to` arrive as plain strings."""

    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    balance: Money | None = None
    incoming: CashFlowDirection | None = None
    outgoing: CashFlowDirection | None = None


class _AgedBalanceEntry(FreeAgentModel):
    contact: ResourceUrl | None = None
    contact_name: str | None = None
    current: Money | None = None
    overdue_1_to_30_days: Money | None = None
    overdue_31_to_60_days: Money | None = None
    overdue_61_to_90_days: Money | None = None
    overdue_over_90_days: Money | None = None
    total: Money | None = None


class AgedDebtorEntry(_AgedBalanceEntry):
    """Amount a customer owes, bucketed by days overdue."""


class AgedCreditorEntry(_AgedBalanceEntry):
    """Amount owed to a supplier, bucketed by days overdue."""


class SalesAgedDebtors(FreeAgentModel):
    dated_on: date | None = None
    entries: tuple[AgedDebtorEntry, ...] | None = None
    total_current: Money | None = None
    total_overdue_1_to_30_days: Money | None = None
    total_overdue_31_to_60_days: Money | None = None
    total_overdue_61_to_90_days: Money | None = None
    total_overdue_over_90_days: Money | None = None
    total: Money | None = None


class PurchaseAgedCreditors(FreeAgentModel):
    dated_on: date | None = None
    entries: tuple[AgedCreditorEntry, ...] | None = None
    total_current: Money | None = None
    total_overdue_1_to_30_days: Money | None = None
    total_overdue_31_to_60_days: Money | None = None
    total_overdue_61_to_90_days: Money | None = None
    total_overdue_over_90_days: Money | None = None
    total: Money | None = None
