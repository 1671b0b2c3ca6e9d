"""Company-level resources: the account's company, currencies, CIS bands."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import OptionalCompanyType, OptionalSalesTaxRegistrationStatus


class SalesTaxRate(FreeAgentModel):
    """A sales tax rate valid over a date range."""

    rate: Money = Field(..., description="Porcentaje del impuesto (p.ej. 20.0).")
    description: str | None = None
    valid_from: date | None = None
    valid_to: date | None = None


class Company(FreeAgentModel):
    """The company behind the authenticated FreeAgent account."""

    omit_when_none = True

    url: ResourceUrl | None = None
    name: str | None = None
    subdomain: str | None = None
    type: OptionalCompanyType = Field(
        default=None,
        description="Estructura legal (UkLimitedCompany, UsSCorp, ...).",
    )
    currency: str | None = None
    mileage_units: str | None = None
    company_start_date: date | None = None
    first_accounting_year_end: date | None = None
    company_registration_number: str | None = None
    sales_tax_registration_status: OptionalSalesTaxRegistrationStatus = None
    sales_tax_registration_number: str | None = None
    sales_tax_rates: tuple[SalesTaxRate, ...] | None = None
    supports_auto_sales_tax_on_purchases: Flag | None = None
    ec_vat_reporting_enabled: Flag | None = None


class AnnualAccountingPeriod(FreeAgentModel):
    omit_when_none = True

    starts_on: date | None = None
    ends_on: date | None = None


class Currency(FreeAgentModel):
    code: str | None = None
    name: str | None = None
    symbol: str | None = None


class CisBand(FreeAgentModel):
    """Construction Industry Scheme deduction band."""

    omit_when_none = True

    name: str | None = None
    deduction_rate: Money | None = None
    income_description: str | None = None
    deduction_description: str | None = None
    nominal_code: str | None = None
