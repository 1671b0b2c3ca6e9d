"""Bank accounts, feeds, transactions, explanations and statement uploads."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import OptionalRebillType


class BankAccount(FreeAgentModel):
    """A current, savings, credit card or PayPal account."""

    omit_when_none = True

    url: ResourceUrl | None = None
    type: str | None = Field(
        default=None,
        description="StandardBankAccount, CreditCardAccount, PaypalAccount, ...",
    )
    name: str | None = None
    nominal_code: str | None = None
    account_number: str | None = None
    sort_code: str | None = None
    secondary_sort_code: str | None = None
    iban: str | None = None
    bic: str | None = None
    opening_balance: Money | None = None
    current_balance: Money | None = None
    bank_name: str | None = None
    currency: str | None = None
    is_primary: Flag | None = None
    status: str | None = None
    is_personal: Flag | None = None
    bank_feed_id: str | None = None
    bank_feed_status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BankAccountDetails(FreeAgentModel):
    omit_when_none = True

    bank_name: str | None = None
    account_number: str | None = None
    sort_code: str | None = None
    iban: str | None = None
    bic: str | None = None


class BankFeed(FreeAgentModel):
    url: ResourceUrl | None = None
    bank_account: ResourceUrl | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    feed_type: str | None = None
    bank_service_name: str | None = None
    sca_expires_at: datetime | None = None


class BankTransaction(FreeAgentModel):
    omit_when_none = True

    url: ResourceUrl | None = None
    bank_account: ResourceUrl | None = None
    dated_on: date | None = None
    description: str | None = None
    full_description: str | None = None
    amount: Money | None = None
    unexplained_amount: Money | None = None
    is_explained: Flag | None = None
    is_manual: Flag | None = None
    is_locked: Flag | None = None
    bank_transaction_explanations: ResourceUrl | None = None
    uploaded_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BankTransactionExplanation(FreeAgentModel):
    """How (part of) a bank transaction is accounted for."""

    omit_when_none = True

    url: ResourceUrl | None = None
    bank_transaction: ResourceUrl | None = None
    bank_account: ResourceUrl | None = None
    dated_on: date | None = None
    category: ResourceUrl | None = None
    gross_value: Money | None = None
    sales_tax_rate: Money | None = None
    manual_sales_tax_amount: Money | None = None
    description: str | None = None
    attachment: ResourceUrl | None = None
    rebill_type: OptionalRebillType = None
    rebill_factor: Money | None = None
    foreign_currency_value: Money | None = None
    currency: str | None = None
    linked_invoice: ResourceUrl | None = None
    linked_credit_note: ResourceUrl | None = None
    linked_bill: ResourceUrl | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BankTransactionUpload(FreeAgentModel):
    """One transaction in a JSON statement upload; `dated_on` is mandatory."""

    omit_when_none = frozenset({"description", "amount", "fitid", "transaction_type"})

    dated_on: date
    description: str | None = None
    amount: Money | None = None
    fitid: str | None = None
    transaction_type: str | None = None


class BankStatementUpload(FreeAgentModel):
    """Base64 statement file (OFX, QIF, CSV) for a bank account."""

    bank_account: ResourceUrl | None = None
    statement: str | None = None
    file_type: str | None = None


class StatementUpload(FreeAgentModel):
    statement: str | None = None
    file_type: str | None = None


class BankStatementUploadResponse(FreeAgentModel):
    imported_transaction_count: int | None = None
    duplicate_transaction_count: int | None = None
    ignored_transaction_count: int | None = None
    bank_transactions: tuple[BankTransaction, ...] | None = None
    errors: tuple[str, ...] | None = None


class BankAccountOpeningBalance(FreeAgentModel):
    url: ResourceUrl | None = None
    description: str | None = None
    debit_value: Money | None = None
