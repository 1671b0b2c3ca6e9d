"""Expenses, mileage claims and the mileage settings published by FreeAgent."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl
from freeagent_domain.core.domain.enums import (
    ExpenseAttachmentContentType,
    OptionalEcStatus,
    OptionalEngineType,
    OptionalRebillType,
    OptionalRecurringPattern,
    OptionalSalesTaxStatus,
    OptionalVehicleType,
)


class ExpenseAttachment(FreeAgentModel):
    """Receipt uploaded with an expense (base64 `data`)."""

    omit_when_none = True

    data: str | None = None
    file_name: str | None = None
    description: str | None = None
    content_type: str | None = Field(
        default=None,
        description="Uno de ExpenseAttachmentContentType (png, jpeg, gif o pdf).",
    )

    def has_supported_content_type(self) -> bool:
        return self.content_type in ExpenseAttachmentContentType.all()


class Expense(FreeAgentModel):
    """An out-of-pocket expense or mileage claim made by a user."""

    omit_when_none = True

    url: ResourceUrl | None = None
    user: ResourceUrl | None = None
    project: ResourceUrl | None = None
    gross_value: Money | None = None
    native_gross_value: Money | None = None
    sales_tax_rate: Money | None = None
    sales_tax_value: Money | None = None
    native_sales_tax_value: Money | None = None
    sales_tax_status: OptionalSalesTaxStatus = None
    second_sales_tax_rate: Money | None = None
    second_sales_tax_status: OptionalSalesTaxStatus = None
    description: str | None = None
    dated_on: date | None = None
    category: str | None = None
    rebill_to_project: ResourceUrl | None = None
    rebilled_on_invoice: ResourceUrl | None = None
    property: ResourceUrl | None = None
    recurring: OptionalRecurringPattern = None
    next_recurs_on: date | None = None
    recurring_end_date: date | None = None
    stock_item: ResourceUrl | None = None
    stock_item_description: str | None = None
    stock_altering_quantity: Money | None = None
    capital_asset: ResourceUrl | None = None
    depreciation_schedule: str | None = None
    mileage: Money | None = None
    reclaim_mileage_rate: Money | None = None
    rebill_mileage_rate: Money | None = None
    rebill_type: OptionalRebillType = None
    initial_rate_mileage: Money | None = None
    receipt_reference: str | None = None
    ec_status: OptionalEcStatus = None
    currency: str | None = None
    manual_sales_tax_amount: Money | None = None
    rebill_factor: Money | None = None
    vehicle_type: OptionalVehicleType = None
    engine_type: OptionalEngineType = None
    engine_size: str | None = None
    reclaim_mileage: int | None = None
    have_vat_receipt: Flag | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    attachment: ExpenseAttachment | None = None


class Mileage(FreeAgentModel):
    """A mileage claim. The distance travels as `mileage` on the wire."""

    url: ResourceUrl | None = None
    user: ResourceUrl | None = None
    project: ResourceUrl | None = None
    dated_on: date | None = None
    description: str | None = None
    miles: Money | None = Field(default=None, alias="mileage")
    reclaim_mileage: Flag | None = None
    reclaim_mileage_rate: Money | None = None
    rebill_mileage: Flag | None = None
    rebill_mileage_rate: Money | None = None
    reclaim_mileage_value: Money | None = None
    rebill_mileage_value: Money | None = None
    vehicle_type: OptionalVehicleType = None
    engine_type: OptionalEngineType = None
    engine_size: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VehicleMileageRate(FreeAgentModel):
    basic_rate: Money | None = None
    additional_rate: Money | None = None


class MileageRatesValue(FreeAgentModel):
    car: VehicleMileageRate | None = Field(default=None, alias="Car")
    motorcycle: VehicleMileageRate | None = Field(default=None, alias="Motorcycle")
    bicycle: VehicleMileageRate | None = Field(default=None, alias="Bicycle")
    basic_rate_limit: int | None = None


class MileageRateOption(FreeAgentModel):
    """Mileage rates valid between `from` and `to`."""

    from_: date | None = Field(default=None, alias="from")
    to: date | None = None
    value: MileageRatesValue | None = None


class EngineTypeAndSizeOption(FreeAgentModel):
    """Engine sizes available per engine type between `from` and `to`."""

    from_: date | None = Field(default=None, alias="from")
    to: date | None = None
    value: dict[str, tuple[str, ...]] | None = None


class MileageSettings(FreeAgentModel):
    engine_type_and_size_options: tuple[EngineTypeAndSizeOption, ...] | None = None
    mileage_rates: tuple[MileageRateOption, ...] | None = None

    def rates_on(self, day: date) -> MileageRatesValue | None:
        """Rates in force on `day` (open-ended bounds match any date)."""

        for option in self.mileage_rates or ():
            if option.from_ is not None and day < option.from_:
                continue
            if option.to is not None and day > option.to:
                continue
            return option.value
        return None
