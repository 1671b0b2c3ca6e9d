"""Projects, tasks, timeslips and notes."""

from __future__ import annotations

from datetime import datetime

from pydantic import AwareDatetime, Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl


class Project(FreeAgentModel):
    """A project for a contact.

    Los campos `contact`, `name`, `status`, `uses_project_invoice_sequence`,
    `currency` y `budget` son obligatorios al crear un proyecto, así que el
    decode falla si faltan.
    """

    omit_when_none = frozenset(
        {
            "url",
            "contact_name",
            "contract_po_reference",
            "budget_units",
            "hours_per_day",
            "normal_billing_rate",
            "billing_period",
            "is_ir35",
            "starts_on",
            "ends_on",
            "include_unbilled_time_in_profitability",
            "is_deletable",
            "created_at",
            "updated_at",
        }
    )

    url: ResourceUrl | None = None
    contact: ResourceUrl
    contact_name: str | None = None
    name: str = Field(..., description="Nombre del proyecto.")
    status: str = Field(..., description="Active, Completed, Cancelled o Hidden.")
    contract_po_reference: str | None = None
    uses_project_invoice_sequence: Flag
    currency: str
    budget: Money
    budget_units: str | None = None
    hours_per_day: Money | None = None
    normal_billing_rate: Money | None = None
    billing_period: str | None = None
    is_ir35: Flag | None = None
    starts_on: AwareDatetime | None = None
    ends_on: AwareDatetime | None = None
    include_unbilled_time_in_profitability: Flag | None = None
    is_deletable: Flag | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None


class TaskItem(FreeAgentModel):
    """A task within a project (`task` on the wire)."""

    omit_when_none = frozenset(
        {"project", "is_billable", "billing_rate", "billing_period", "status", "created_at", "updated_at", "url"}
    )

    project: str | None = None
    name: str
    is_billable: Flag | None = None
    billing_rate: Money | None = None
    billing_period: str | None = None
    status: str | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
    url: ResourceUrl | None = None


class Timer(FreeAgentModel):
    running: Flag = False
    start_from: AwareDatetime | None = None


class Timeslip(FreeAgentModel):
    omit_when_none = frozenset({"comment"})

    url: ResourceUrl | None = None
    user: ResourceUrl | None = None
    project: ResourceUrl | None = None
    task: ResourceUrl | None = None
    dated_on: AwareDatetime | None = None
    hours: Money | None = None
    comment: str | None = None
    updated_at: AwareDatetime | None = None
    created_at: AwareDatetime | None = None
    billed_on_invoice: ResourceUrl | None = None
    timer: Timer | None = None


class NoteItem(FreeAgentModel):
    """A note attached to a contact or project."""

    url: str | None = None
    note: str | None = None
    parent_url: str | None = None
    author: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
