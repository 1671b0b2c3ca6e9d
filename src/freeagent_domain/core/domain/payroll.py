"""Payroll: periods, payments, payslips and employee profiles (read-only in the API)."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import AwareDatetime

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl


class Payslip(FreeAgentModel):
    url: ResourceUrl | None = None
    user: ResourceUrl | None = None
    gross_salary: Money | None = None
    net_salary: Money | None = None
    income_tax: Money | None = None
    employee_nic: Money | None = None
    employee_pension: Money | None = None
    employer_nic: Money | None = None
    employer_pension: Money | None = None
    student_loan: Money | None = None
    dated_on: date | None = None


class PayrollPeriod(FreeAgentModel):
    """One pay run (month or week) of a payroll year."""

    url: ResourceUrl | None = None
    period: int | None = None
    frequency: str | None = None
    dated_on: date | None = None
    status: str | None = None
    employment_allowance_claimed: Flag | None = None
    employment_allowance_amount: Money | None = None
    construction_industry_scheme_deduction: Money | None = None
    payslips: tuple[Payslip, ...] | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None


class PayrollPayment(FreeAgentModel):
    """PAYE/NI payment due to HMRC."""

    url: ResourceUrl | None = None
    user: ResourceUrl | None = None
    dated_on: date | None = None
    gross_pay: Money | None = None
    income_tax: Money | None = None
    employee_ni: Money | None = None
    employer_ni: Money | None = None
    employee_pension: Money | None = None
    employer_pension: Money | None = None
    student_loan: Money | None = None
    net_pay: Money | None = None
    total_cost: Money | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PayrollProfile(FreeAgentModel):
    user: ResourceUrl | None = None
    address_line_1: str | None = None
    address_line_2: str | None = None
    address_line_3: str | None = None
    address_line_4: str | None = None
    postcode: str | None = None
    country: str | None = None
    title: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    total_pay_in_previous_employment: Money | None = None
    total_tax_in_previous_employment: Money | None = None
    employment_starts_on: date | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
