"""Tax returns and filings: VAT, corporation tax, final accounts, self assessment.

Los `*Filing` son cuerpos de request para marcar una declaración como
presentada; construirlos con `filed(...)` garantiza el formato de fecha
`yyyy-MM-dd` que exige la API.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import AwareDatetime

from freeagent_domain.core.dates import format_date
from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import (
    CorporationTaxFilingStatusValue,
    FinalAccountsFilingStatusValue,
    OptionalCorporationTaxPaymentStatus,
    OptionalSalesTaxRegistrationStatus,
)


class VatReturn(FreeAgentModel):
    """A VAT return with the nine HMRC boxes."""

    omit_when_none = True

    url: ResourceUrl | None = None
    period_starts_on: date | None = None
    period_ends_on: date | None = None
    frequency: str | None = None
    status: str | None = None
    box1_vat_due_on_sales: Money | None = None
    box2_vat_due_on_acquisitions: Money | None = None
    box3_total_vat_due: Money | None = None
    box4_vat_reclaimed: Money | None = None
    box5_net_vat_due: Money | None = None
    box6_total_sales_ex_vat: Money | None = None
    box7_total_purchases_ex_vat: Money | None = None
    box8_total_supplies_ex_vat: Money | None = None
    box9_total_acquisitions_ex_vat: Money | None = None
    filed_on: date | None = None
    filed_online: Flag | None = None
    hmrc_reference: str | None = None


class VatReturnFiling(FreeAgentModel):
    filed_on: str | None = None
    filed_online: Flag = False
    hmrc_reference: str | None = None

    @classmethod
    def filed(cls, filed_on: date, *, online: bool = False, hmrc_reference: str | None = None) -> VatReturnFiling:
        return cls(filed_on=format_date(filed_on), filed_online=online, hmrc_reference=hmrc_reference)


class VatReturnPayment(FreeAgentModel):
    label: str
    due_on: date
    amount_due: Money
    status: str | None = None


class CorporationTaxReturn(FreeAgentModel):
    """A CT600 return; identity, period, filing status and due date are mandatory."""

    url: ResourceUrl
    period_starts_on: date
    period_ends_on: date
    filing_status: CorporationTaxFilingStatusValue
    payment_status: OptionalCorporationTaxPaymentStatus = None
    amount_due: Money | None = None
    filed_at: AwareDatetime | None = None
    filed_reference: str | None = None
    payment_due_on: date | None = None
    filing_due_on: date


class CorporationTaxReturnFiling(FreeAgentModel):
    filed_on: str | None = None
    filed_online: Flag = False
    hmrc_reference: str | None = None

    @classmethod
    def filed(
        cls, filed_on: date, *, online: bool = False, hmrc_reference: str | None = None
    ) -> CorporationTaxReturnFiling:
        return cls(filed_on=format_date(filed_on), filed_online=online, hmrc_reference=hmrc_reference)


class FinalAccountsReport(FreeAgentModel):
    url: ResourceUrl
    period_starts_on: date
    period_ends_on: date
    filing_due_on: date
    filing_status: FinalAccountsFilingStatusValue
    filed_at: datetime | None = None
    filed_reference: str | None = None


class SelfAssessmentReturn(FreeAgentModel):
    url: ResourceUrl | None = None
    user: ResourceUrl | None = None
    period_starts_on: date | None = None
    period_ends_on: date | None = None
    status: str | None = None
    income_tax_due: Money | None = None
    national_insurance_due: Money | None = None
    capital_gains_tax_due: Money | None = None
    student_loan_repayment_due: Money | None = None
    total_tax_due: Money | None = None
    payments_on_account_due: Money | None = None
    filed_on: date | None = None
    filed_online: Flag | None = None
    utr_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SelfAssessmentReturnFiling(FreeAgentModel):
    filed_on: str | None = None
    filed_online: Flag = False
    utr_number: str | None = None

    @classmethod
    def filed(
        cls, filed_on: date, *, online: bool = False, utr_number: str | None = None
    ) -> SelfAssessmentReturnFiling:
        return cls(filed_on=format_date(filed_on), filed_online=online, utr_number=utr_number)


class SelfAssessmentPayment(FreeAgentModel):
    label: str
    due_on: date
    amount_due: Money
    status: str | None = None


class SalesTaxPeriod(FreeAgentModel):
    """Sales tax settings effective from `effective_date`."""

    omit_when_none = True

    url: ResourceUrl | None = None
    sales_tax_name: str | None = None
    sales_tax_registration_status: OptionalSalesTaxRegistrationStatus = None
    sales_tax_is_value_added: Flag | None = None
    effective_date: date | None = None
    sales_tax_rate_1: Money | None = None
    sales_tax_rate_2: Money | None = None
    sales_tax_rate_3: Money | None = None
    sales_tax_registration_number: str | None = None
    is_locked: Flag | None = None
    locked_reason: Flag | None = None
    second_sales_tax_name: str | None = None
    second_sales_tax_rate_1: Money | None = None
    second_sales_tax_rate_2: Money | None = None
    second_sales_tax_rate_3: Money | None = None
    second_sales_tax_is_compound: Flag | None = None


class EcMossSalesTaxRate(FreeAgentModel):
    percentage: Money
    band: str


class TaxTimelineItem(FreeAgentModel):
    """Upcoming tax deadline or payment."""

    omit_when_none = True

    description: str | None = None
    nature: str | None = None
    dated_on: date | None = None
    amount_due: Money | None = None
    is_personal: Flag | None = None
