"""Contacts (clients/suppliers) and properties."""

from __future__ import annotations

from pydantic import AwareDatetime, Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, ResourceUrl


class Contact(FreeAgentModel):
    """A client or supplier.

    Por qué tantos `str`:
    - La API devuelve `charge_sales_tax`, `account_balance` o
      `active_projects_count` como texto; se conservan tal cual para no
      perder el formato original.
    """

    omit_when_none = True

    url: ResourceUrl | None = None
    first_name: str | None = None
    last_name: str | None = None
    organisation_name: str | None = None
    email: str | None = None
    billing_email: str | None = None
    phone_number: str | None = None
    mobile: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    town: str | None = None
    region: str | None = None
    postcode: str | None = None
    country: str | None = None
    contact_name_on_invoices: Flag | None = None
    locale: str | None = None
    uses_contact_invoice_sequence: Flag | None = None
    charge_sales_tax: str | None = Field(
        default=None,
        description="Always, Never o Auto (texto libre en la API).",
    )
    sales_tax_registration_number: str | None = None
    active_projects_count: str | None = None
    account_balance: str | None = None
    status: str | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
    direct_debit_mandate_state: str | None = None
    default_payment_terms_in_days: int | None = None
    is_cis_subcontractor: Flag | None = None
    cis_deduction_rate: str | None = None
    unique_tax_reference: str | None = None
    subcontractor_verification_number: str | None = None

    def display_name(self) -> str:
        """Organisation name, else "first last", else an empty string."""

        if self.organisation_name:
            return self.organisation_name
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts)


class Property(FreeAgentModel):
    """A rental property (unincorporated landlords)."""

    omit_when_none = True

    url: ResourceUrl | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    town: str | None = None
    region: str | None = None
    postcode: str | None = None
    country: str | None = None
