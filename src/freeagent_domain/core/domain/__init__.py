"""Modelos y entidades del dominio FreeAgent.

Por qué:
- Aquí viven los registros puros e inmutables (Pydantic v2) que reflejan el
  contrato JSON de la API v2.
- El dominio no conoce HTTP ni CLI: solo la forma de los recursos.
"""

from freeagent_domain.core.domain.accounting import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
    ForeignCurrencyData,
    JournalEntry,
    JournalSet,
    OpeningBalance,
    OpeningBalanceEntry,
    OpeningBalanceJournal,
    PriceListItem,
    StockItem,
    StockItemOpeningBalance,
    Transaction,
)
from freeagent_domain.core.domain.assets import (
    CapitalAsset,
    CapitalAssetDepreciationSettings,
    CapitalAssetHistoryEvent,
    CapitalAssetType,
    DepreciationProfile,
    HirePurchase,
)
from freeagent_domain.core.domain.attachments import Attachment
from freeagent_domain.core.domain.banking import (
    BankAccount,
    BankAccountDetails,
    BankAccountOpeningBalance,
    BankFeed,
    BankStatementUpload,
    BankStatementUploadResponse,
    BankTransaction,
    BankTransactionExplanation,
    BankTransactionUpload,
    StatementUpload,
)
from freeagent_domain.core.domain.base import Envelope, FreeAgentModel, Link
from freeagent_domain.core.domain.bills import Bill, BillAttachment, BillItem, BillPayment
from freeagent_domain.core.domain.company import AnnualAccountingPeriod, CisBand, Company, Currency, SalesTaxRate
from freeagent_domain.core.domain.contacts import Contact, Property
from freeagent_domain.core.domain.credit_notes import (
    CreditNote,
    CreditNoteEmailWrapper,
    CreditNoteItem,
    CreditNotePdf,
    CreditNoteReconciliation,
    CreditNoteRefund,
)
from freeagent_domain.core.domain.enums import (
    AutoSalesTaxRateType,
    CategoryGroupType,
    CompanyType,
    CorporationTaxFilingStatus,
    CorporationTaxPaymentStatus,
    EcStatus,
    EngineType,
    ExpenseAttachmentContentType,
    FinalAccountsFilingStatus,
    RebillType,
    RecurringPattern,
    Role,
    SalesTaxRegistrationStatus,
    SalesTaxStatus,
    VatBasis,
    VehicleType,
)
from freeagent_domain.core.domain.estimates import (
    Estimate,
    EstimateDefaultAdditionalText,
    EstimateEmail,
    EstimateEmailWrapper,
    EstimateItem,
    EstimatePdf,
)
from freeagent_domain.core.domain.expenses import (
    EngineTypeAndSizeOption,
    Expense,
    ExpenseAttachment,
    Mileage,
    MileageRateOption,
    MileageRatesValue,
    MileageSettings,
    VehicleMileageRate,
)
from freeagent_domain.core.domain.invoices import (
    EmailAttachment,
    Invoice,
    InvoiceDefaultAdditionalText,
    InvoiceEmail,
    InvoiceEmailWrapper,
    InvoiceItem,
    InvoicePayment,
    InvoicePdf,
    InvoiceTimelineEntry,
    PaymentMethods,
    RecurringInvoice,
)
from freeagent_domain.core.domain.payroll import PayrollPayment, PayrollPeriod, PayrollProfile, Payslip
from freeagent_domain.core.domain.projects import NoteItem, Project, TaskItem, Timer, Timeslip
from freeagent_domain.core.domain.reports import (
    AgedCreditorEntry,
    AgedDebtorEntry,
    AssetsSection,
    BalanceSheet,
    BalanceSheetAccount,
    BalanceSheetEntry,
    CapitalAssetsSection,
    CashFlow,
    CashFlowDirection,
    CashFlowItem,
    CashFlowMonthly,
    LiabilitiesSection,
    OwnersEquitySection,
    ProfitAndLoss,
    ProfitAndLossDeduction,
    ProfitAndLossEntry,
    PurchaseAgedCreditors,
    SalesAgedDebtors,
    TrialBalance,
    TrialBalanceEntry,
    TrialBalanceSummaryEntry,
)
from freeagent_domain.core.domain.taxes import (
    CorporationTaxReturn,
    CorporationTaxReturnFiling,
    EcMossSalesTaxRate,
    FinalAccountsReport,
    SalesTaxPeriod,
    SelfAssessmentPayment,
    SelfAssessmentReturn,
    SelfAssessmentReturnFiling,
    TaxTimelineItem,
    VatReturn,
    VatReturnFiling,
    VatReturnPayment,
)
from freeagent_domain.core.domain.users import User, UserPayrollProfile
from freeagent_domain.core.domain.webhooks import Webhook, WebhookPayload

# Every concrete resource record (envelopes live in `roots.ENVELOPES`).
RESOURCES: tuple[type[FreeAgentModel], ...] = (
    AgedCreditorEntry,
    AgedDebtorEntry,
    AnnualAccountingPeriod,
    AssetsSection,
    Attachment,
    BalanceSheet,
    BalanceSheetAccount,
    BalanceSheetEntry,
    BankAccount,
    BankAccountDetails,
    BankAccountOpeningBalance,
    BankFeed,
    BankStatementUpload,
    BankStatementUploadResponse,
    BankTransaction,
    BankTransactionExplanation,
    BankTransactionUpload,
    Bill,
    BillAttachment,
    BillItem,
    BillPayment,
    CapitalAsset,
    CapitalAssetDepreciationSettings,
    CapitalAssetHistoryEvent,
    CapitalAssetType,
    CapitalAssetsSection,
    CashFlow,
    CashFlowDirection,
    CashFlowItem,
    CashFlowMonthly,
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
    CisBand,
    Company,
    Contact,
    CorporationTaxReturn,
    CorporationTaxReturnFiling,
    CreditNote,
    CreditNoteEmailWrapper,
    CreditNoteItem,
    CreditNotePdf,
    CreditNoteReconciliation,
    CreditNoteRefund,
    Currency,
    DepreciationProfile,
    EcMossSalesTaxRate,
    EmailAttachment,
    EngineTypeAndSizeOption,
    Estimate,
    EstimateDefaultAdditionalText,
    EstimateEmail,
    EstimateEmailWrapper,
    EstimateItem,
    EstimatePdf,
    Expense,
    ExpenseAttachment,
    FinalAccountsReport,
    ForeignCurrencyData,
    HirePurchase,
    Invoice,
    InvoiceDefaultAdditionalText,
    InvoiceEmail,
    InvoiceEmailWrapper,
    InvoiceItem,
    InvoicePayment,
    InvoicePdf,
    InvoiceTimelineEntry,
    JournalEntry,
    JournalSet,
    LiabilitiesSection,
    Link,
    Mileage,
    MileageRateOption,
    MileageRatesValue,
    MileageSettings,
    NoteItem,
    OpeningBalance,
    OpeningBalanceEntry,
    OpeningBalanceJournal,
    OwnersEquitySection,
    PaymentMethods,
    PayrollPayment,
    PayrollPeriod,
    PayrollProfile,
    Payslip,
    PriceListItem,
    ProfitAndLoss,
    ProfitAndLossDeduction,
    ProfitAndLossEntry,
    Project,
    Property,
    PurchaseAgedCreditors,
    RecurringInvoice,
    SalesAgedDebtors,
    SalesTaxPeriod,
    SalesTaxRate,
    SelfAssessmentPayment,
    SelfAssessmentReturn,
    SelfAssessmentReturnFiling,
    StatementUpload,
    StockItem,
    StockItemOpeningBalance,
    TaskItem,
    TaxTimelineItem,
    Timer,
    Timeslip,
    Transaction,
    TrialBalance,
    TrialBalanceEntry,
    TrialBalanceSummaryEntry,
    User,
    UserPayrollProfile,
    VatReturn,
    VatReturnFiling,
    VatReturnPayment,
    VehicleMileageRate,
    Webhook,
    WebhookPayload,
)

__all__ = [cls.__name__ for cls in RESOURCES] + [
    "AutoSalesTaxRateType",
    "CategoryGroupType",
    "CompanyType",
    "CorporationTaxFilingStatus",
    "CorporationTaxPaymentStatus",
    "EcStatus",
    "EngineType",
    "Envelope",
    "ExpenseAttachmentContentType",
    "FinalAccountsFilingStatus",
    "FreeAgentModel",
    "RESOURCES",
    "RebillType",
    "RecurringPattern",
    "Role",
    "SalesTaxRegistrationStatus",
    "SalesTaxStatus",
    "VatBasis",
    "VehicleType",
]
