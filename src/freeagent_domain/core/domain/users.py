"""Users of the FreeAgent account."""

from __future__ import annotations

from pydantic import AwareDatetime

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import OptionalRole


class UserPayrollProfile(FreeAgentModel):
    total_pay_in_previous_employment: Money | None = None
    total_tax_in_previous_employment: Money | None = None


class User(FreeAgentModel):
    """A user; identity and payroll fields are only sent when set."""

    omit_when_none = frozenset({"ni_number", "unique_tax_reference", "send_invitation"})

    url: ResourceUrl | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    role: OptionalRole = None
    hidden: Flag | None = None
    permission_level: int | None = None
    opening_mileage: Money | None = None
    updated_at: AwareDatetime | None = None
    created_at: AwareDatetime | None = None
    ni_number: str | None = None
    unique_tax_reference: str | None = None
    send_invitation: Flag | None = None
    current_payroll_profile: UserPayrollProfile | None = None
