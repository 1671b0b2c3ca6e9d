"""Envelope (root) records matching the API's top-level JSON shape.

Collection envelopes hold a tuple that is never `None`: a missing key or an
explicit `null` decodes as empty. Singleton envelopes hold one record or
`None`. `ENVELOPES` indexes every envelope by class name for tooling.
"""

from __future__ import annotations

from freeagent_domain.core.domain.accounting import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
    JournalSet,
    OpeningBalance,
    PriceListItem,
    StockItem,
    Transaction,
)
from freeagent_domain.core.domain.assets import (
    CapitalAsset,
    CapitalAssetType,
    DepreciationProfile,
    HirePurchase,
)
from freeagent_domain.core.domain.attachments import Attachment
from freeagent_domain.core.domain.banking import (
    BankAccount,
    BankFeed,
    BankStatementUpload,
    BankStatementUploadResponse,
    BankTransaction,
    BankTransactionExplanation,
    BankTransactionUpload,
    StatementUpload,
)
from freeagent_domain.core.domain.base import Envelope, Many
from freeagent_domain.core.domain.bills import Bill
from freeagent_domain.core.domain.company import CisBand, Company, Currency, SalesTaxRate
from freeagent_domain.core.domain.contacts import Contact, Property
from freeagent_domain.core.domain.credit_notes import (
    CreditNote,
    CreditNoteEmailWrapper,
    CreditNotePdf,
    CreditNoteReconciliation,
    CreditNoteRefund,
)
from freeagent_domain.core.domain.estimates import (
    Estimate,
    EstimateDefaultAdditionalText,
    EstimateEmailWrapper,
    EstimateItem,
    EstimatePdf,
)
from freeagent_domain.core.domain.expenses import Expense, Mileage, MileageSettings
from freeagent_domain.core.domain.invoices import (
    Invoice,
    InvoiceDefaultAdditionalText,
    InvoiceEmailWrapper,
    InvoicePdf,
    InvoiceTimelineEntry,
    RecurringInvoice,
)
from freeagent_domain.core.domain.payroll import PayrollPayment, PayrollPeriod, PayrollProfile, Payslip
from freeagent_domain.core.domain.projects import NoteItem, Project, TaskItem, Timeslip
from freeagent_domain.core.domain.reports import (
    BalanceSheet,
    CashFlow,
    ProfitAndLoss,
    PurchaseAgedCreditors,
    SalesAgedDebtors,
    TrialBalance,
    TrialBalanceSummaryEntry,
)
from freeagent_domain.core.domain.taxes import (
    CorporationTaxReturn,
    CorporationTaxReturnFiling,
    EcMossSalesTaxRate,
    FinalAccountsReport,
    SalesTaxPeriod,
    SelfAssessmentReturn,
    SelfAssessmentReturnFiling,
    TaxTimelineItem,
    VatReturn,
    VatReturnFiling,
)
from freeagent_domain.core.domain.users import User
from freeagent_domain.core.domain.webhooks import Webhook


# Company and users

class CompanyRoot(Envelope):
    company: Company | None = None


class BusinessCategoriesRoot(Envelope):
    business_categories: Many[str] = ()


class CurrenciesRoot(Envelope):
    currencies: Many[Currency] = ()


class CisBandsResponse(Envelope):
    available_bands: Many[CisBand] = ()


class EmailAddressesRoot(Envelope):
    email_addresses: Many[str] = ()


class UserRoot(Envelope):
    user: User | None = None


class UsersRoot(Envelope):
    users: Many[User] = ()


# Contacts, projects, tasks, timeslips, notes

class ContactRoot(Envelope):
    contact: Contact | None = None


class ContactsRoot(Envelope):
    contacts: Many[Contact] = ()


class PropertyRoot(Envelope):
    property: Property | None = None


class PropertiesRoot(Envelope):
    properties: Many[Property] = ()


class ProjectRoot(Envelope):
    project: Project | None = None


class ProjectsRoot(Envelope):
    projects: Many[Project] = ()


class TaskRoot(Envelope):
    task: TaskItem | None = None


class TasksRoot(Envelope):
    tasks: Many[TaskItem] = ()


class TimeslipRoot(Envelope):
    timeslip: Timeslip | None = None


class TimeslipsRoot(Envelope):
    timeslips: Many[Timeslip] = ()


class NoteRoot(Envelope):
    note: NoteItem | None = None


class NotesRoot(Envelope):
    notes: Many[NoteItem] = ()


# Invoices, estimates, credit notes

class InvoiceRoot(Envelope):
    invoice: Invoice | None = None


class InvoicesRoot(Envelope):
    invoices: Many[Invoice] = ()


class InvoiceEmailRoot(Envelope):
    invoice: InvoiceEmailWrapper | None = None


class InvoicePdfRoot(Envelope):
    pdf: InvoicePdf | None = None


class InvoiceTimelineRoot(Envelope):
    timeline_entries: Many[InvoiceTimelineEntry] = ()


class InvoiceDefaultAdditionalTextRoot(Envelope):
    invoice: InvoiceDefaultAdditionalText | None = None


class RecurringInvoiceRoot(Envelope):
    recurring_invoice: RecurringInvoice | None = None


class RecurringInvoicesRoot(Envelope):
    recurring_invoices: Many[RecurringInvoice] = ()


class EstimateRoot(Envelope):
    estimate: Estimate | None = None


class EstimatesRoot(Envelope):
    estimates: Many[Estimate] = ()


class EstimateItemRoot(Envelope):
    estimate_item: EstimateItem | None = None


class EstimateEmailRoot(Envelope):
    estimate: EstimateEmailWrapper | None = None


class EstimatePdfRoot(Envelope):
    pdf: EstimatePdf | None = None


class EstimateDefaultAdditionalTextRoot(Envelope):
    estimate: EstimateDefaultAdditionalText | None = None


class CreditNoteRoot(Envelope):
    credit_note: CreditNote | None = None


class CreditNotesRoot(Envelope):
    credit_notes: Many[CreditNote] = ()


class CreditNoteEmailRoot(Envelope):
    credit_note: CreditNoteEmailWrapper | None = None


class CreditNotePdfRoot(Envelope):
    pdf: CreditNotePdf | None = None


class CreditNoteRefundRoot(Envelope):
    credit_note: CreditNoteRefund | None = None


class CreditNoteReconciliationRoot(Envelope):
    credit_note_reconciliation: CreditNoteReconciliation | None = None


class CreditNoteReconciliationsRoot(Envelope):
    credit_note_reconciliations: Many[CreditNoteReconciliation] = ()


# Bills, expenses, mileage

class BillRoot(Envelope):
    bill: Bill | None = None


class BillsRoot(Envelope):
    bills: Many[Bill] = ()


class ExpenseRoot(Envelope):
    expense: Expense | None = None


class ExpensesRoot(Envelope):
    expenses: Many[Expense] = ()


class MileageRoot(Envelope):
    mileage: Mileage | None = None


class MileagesRoot(Envelope):
    mileages: Many[Mileage] = ()


class MileageSettingsRoot(Envelope):
    mileage_settings: MileageSettings | None = None


class AttachmentRoot(Envelope):
    attachment: Attachment | None = None


# Banking

class BankAccountRoot(Envelope):
    bank_account: BankAccount | None = None


class BankAccountsRoot(Envelope):
    bank_accounts: Many[BankAccount] = ()


class BankFeedRoot(Envelope):
    bank_feed: BankFeed | None = None


class BankFeedsRoot(Envelope):
    bank_feeds: Many[BankFeed] = ()


class BankTransactionRoot(Envelope):
    bank_transaction: BankTransaction | None = None


class BankTransactionsRoot(Envelope):
    bank_transactions: Many[BankTransaction] = ()


class BankTransactionExplanationRoot(Envelope):
    bank_transaction_explanation: BankTransactionExplanation | None = None


class BankTransactionExplanationsRoot(Envelope):
    bank_transaction_explanations: Many[BankTransactionExplanation] = ()


class BankTransactionUploadRoot(Envelope):
    """JSON statement upload: `{"statement": [...transactions]}`."""

    statement: Many[BankTransactionUpload] = ()


class BankStatementUploadRoot(Envelope):
    statement: BankStatementUpload | None = None


class StatementUploadRoot(Envelope):
    statement: StatementUpload | None = None


class BankStatementUploadResponseRoot(Envelope):
    import_summary: BankStatementUploadResponse | None = None


# Accounting

class CategoriesRoot(Envelope):
    categories: Many[Category] = ()


class CategoryRoot(Envelope):
    """A single category, keyed by the group it belongs to."""

    income_categories: Category | None = None
    cost_of_sales_categories: Category | None = None
    admin_expenses_categories: Category | None = None
    general_categories: Category | None = None

    def category(self) -> Category | None:
        return (
            self.income_categories
            or self.cost_of_sales_categories
            or self.admin_expenses_categories
            or self.general_categories
        )


class CategoryCreateRequestRoot(Envelope):
    category: CategoryCreateRequest | None = None


class CategoryUpdateRequestRoot(Envelope):
    category: CategoryUpdateRequest | None = None


class JournalSetRoot(Envelope):
    journal_set: JournalSet | None = None


class JournalSetsRoot(Envelope):
    journal_sets: Many[JournalSet] = ()


class OpeningBalanceRoot(Envelope):
    opening_balance: OpeningBalance | None = None


class TransactionRoot(Envelope):
    transaction: Transaction | None = None


class TransactionsRoot(Envelope):
    transactions: Many[Transaction] = ()


class StockItemRoot(Envelope):
    stock_item: StockItem | None = None


class StockItemsRoot(Envelope):
    stock_items: Many[StockItem] = ()


class PriceListItemRoot(Envelope):
    price_list_item: PriceListItem | None = None


class PriceListItemsRoot(Envelope):
    price_list_items: Many[PriceListItem] = ()


# Capital assets

class CapitalAssetRoot(Envelope):
    capital_asset: CapitalAsset | None = None


class CapitalAssetsRoot(Envelope):
    capital_assets: Many[CapitalAsset] = ()


class CapitalAssetTypeRoot(Envelope):
    capital_asset_type: CapitalAssetType | None = None


class CapitalAssetTypesRoot(Envelope):
    capital_asset_types: Many[CapitalAssetType] = ()


class DepreciationProfilesRoot(Envelope):
    depreciation_profiles: Many[DepreciationProfile] = ()


class HirePurchaseRoot(Envelope):
    hire_purchase: HirePurchase | None = None


class HirePurchasesRoot(Envelope):
    hire_purchases: Many[HirePurchase] = ()


# Payroll

class PayrollPeriodRoot(Envelope):
    period: PayrollPeriod | None = None


class PayrollYearRoot(Envelope):
    periods: Many[PayrollPeriod] = ()
    payments: Many[PayrollPayment] = ()


class PayrollPaymentRoot(Envelope):
    payroll_payment: PayrollPayment | None = None


class PayrollPaymentsRoot(Envelope):
    payroll_payments: Many[PayrollPayment] = ()


class PayrollProfileRoot(Envelope):
    payroll_profile: PayrollProfile | None = None


class PayrollProfilesRoot(Envelope):
    payroll_profiles: Many[PayrollProfile] = ()


class PayslipRoot(Envelope):
    payslip: Payslip | None = None


class PayslipsRoot(Envelope):
    payslips: Many[Payslip] = ()


# Taxes

class SalesTaxRatesRoot(Envelope):
    sales_tax_rates: Many[SalesTaxRate] = ()


class EcMossSalesTaxRatesRoot(Envelope):
    sales_tax_rates: Many[EcMossSalesTaxRate] = ()


class SalesTaxPeriodRoot(Envelope):
    sales_tax_period: SalesTaxPeriod | None = None


class SalesTaxPeriodsRoot(Envelope):
    sales_tax_periods: Many[SalesTaxPeriod] = ()


class VatReturnRoot(Envelope):
    vat_return: VatReturn | None = None


class VatReturnsRoot(Envelope):
    vat_returns: Many[VatReturn] = ()


class VatReturnFilingRoot(Envelope):
    vat_return: VatReturnFiling | None = None


class CorporationTaxReturnRoot(Envelope):
    corporation_tax_return: CorporationTaxReturn | None = None


class CorporationTaxReturnsRoot(Envelope):
    corporation_tax_returns: Many[CorporationTaxReturn] = ()


class CorporationTaxReturnFilingRoot(Envelope):
    corporation_tax_return: CorporationTaxReturnFiling | None = None


class FinalAccountsReportRoot(Envelope):
    final_accounts_report: FinalAccountsReport | None = None


class FinalAccountsReportsRoot(Envelope):
    final_accounts_reports: Many[FinalAccountsReport] = ()


class SelfAssessmentReturnRoot(Envelope):
    self_assessment_return: SelfAssessmentReturn | None = None


class SelfAssessmentReturnsRoot(Envelope):
    self_assessment_returns: Many[SelfAssessmentReturn] = ()


class SelfAssessmentReturnFilingRoot(Envelope):
    self_assessment_return: SelfAssessmentReturnFiling | None = None


class TaxTimelineRoot(Envelope):
    timeline_items: Many[TaxTimelineItem] = ()


# Reports

class BalanceSheetRoot(Envelope):
    balance_sheet: BalanceSheet | None = None


class ProfitAndLossRoot(Envelope):
    profit_and_loss: ProfitAndLoss | None = None


class TrialBalanceRoot(Envelope):
    trial_balance: TrialBalance | None = None


class TrialBalanceSummaryRoot(Envelope):
    trial_balance_summary: Many[TrialBalanceSummaryEntry] = ()


class CashFlowRoot(Envelope):
    cashflow: CashFlow | None = None


class SalesAgedDebtorsRoot(Envelope):
    sales_aged_debtors: SalesAgedDebtors | None = None


class PurchaseAgedCreditorsRoot(Envelope):
    purchase_aged_creditors: PurchaseAgedCreditors | None = None


# Webhooks

class WebhookRoot(Envelope):
    webhook: Webhook | None = None


class WebhooksRoot(Envelope):
    webhooks: Many[Webhook] = ()


def _collect_envelopes() -> dict[str, type[Envelope]]:
    return {
        name: obj
        for name, obj in sorted(globals().items())
        if isinstance(obj, type) and issubclass(obj, Envelope) and obj is not Envelope
    }


ENVELOPES: dict[str, type[Envelope]] = _collect_envelopes()


def envelope_named(name: str) -> type[Envelope]:
    """Look up an envelope class by name (`ContactsRoot`, `invoice_root`, ...)."""

    if name in ENVELOPES:
        return ENVELOPES[name]
    wanted = name.replace("_", "").lower()
    for candidate, cls in ENVELOPES.items():
        if candidate.lower() == wanted:
            return cls
    raise KeyError(name)
