"""Capital assets, their types, depreciation and hire purchases."""

from __future__ import annotations

import datetime as dt

from pydantic import AwareDatetime

from freeagent_domain.core.domain.base import Flag, FreeAgentModel, Money, ResourceUrl


class CapitalAsset(FreeAgentModel):
    url: ResourceUrl | None = None
    description: str | None = None
    purchased_on: dt.date | None = None
    disposed_on: dt.date | None = None
    capital_asset_type: ResourceUrl | None = None
    asset_life_years: int | None = None
    purchase_price: Money | None = None
    disposal_proceeds: Money | None = None
    annual_investment_allowance_claimed: Money | None = None
    first_year_allowance_claimed: Money | None = None
    super_deduction_claimed: Money | None = None
    residual_value: Money | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

    def is_disposed(self) -> bool:
        return self.disposed_on is not None


class CapitalAssetDepreciationSettings(FreeAgentModel):
    method: str | None = None
    asset_life_years: int | None = None
    annual_depreciation_percentage: int | None = None
    frequency: str | None = None


class CapitalAssetHistoryEvent(FreeAgentModel):
    """Purchase, depreciation or disposal event in an asset's history."""

    type: str | None = None
    description: str | None = None
    date: dt.date | None = None
    value: Money | None = None
    tax_value: Money | None = None
    link: ResourceUrl | None = None


class CapitalAssetType(FreeAgentModel):
    url: ResourceUrl | None = None
    name: str | None = None
    system_default: Flag | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None


class DepreciationProfile(FreeAgentModel):
    url: ResourceUrl | None = None
    id: int | None = None
    name: str | None = None
    method: str | None = None
    period_years: int | None = None
    residual_percentage: Money | None = None
    annual_percentage: Money | None = None


class HirePurchase(FreeAgentModel):
    omit_when_none = True

    url: ResourceUrl | None = None
    description: str | None = None
    bill: ResourceUrl | None = None
    liabilities_over_one_year_category: ResourceUrl | None = None
    liabilities_under_one_year_category: ResourceUrl | None = None
