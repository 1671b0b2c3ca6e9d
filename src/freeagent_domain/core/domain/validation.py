"""Reglas de negocio para crear categorías personalizadas.

Por qué fuera del modelo:
- `CategoryCreateRequest` debe poder decodificarse aunque viole estas reglas
  (p.ej. al inspeccionar un payload rechazado); validar es un paso explícito.
- Las reglas reflejan lo que FreeAgent rechaza con 422, así el cliente puede
  fallar antes de enviar la petición.
"""

from __future__ import annotations

import re

from freeagent_domain.core.domain.accounting import CategoryCreateRequest
from freeagent_domain.core.domain.enums import AutoSalesTaxRateType, CategoryGroupType
from freeagent_domain.core.errors import CategoryValidationError

NOMINAL_CODE_RANGES: dict[CategoryGroupType, tuple[int, int]] = {
    CategoryGroupType.INCOME: (1, 49),
    CategoryGroupType.COST_OF_SALES: (96, 199),
    CategoryGroupType.ADMIN_EXPENSES: (200, 399),
    CategoryGroupType.CURRENT_ASSETS: (671, 720),
    CategoryGroupType.LIABILITIES: (731, 780),
    CategoryGroupType.EQUITIES: (921, 960),
}

_TAX_REPORTING_NAME_REQUIRED = frozenset(
    {
        CategoryGroupType.COST_OF_SALES,
        CategoryGroupType.ADMIN_EXPENSES,
        CategoryGroupType.CURRENT_ASSETS,
        CategoryGroupType.LIABILITIES,
    }
)
_ALLOWABLE_FOR_TAX_REQUIRED = frozenset({CategoryGroupType.COST_OF_SALES, CategoryGroupType.ADMIN_EXPENSES})
_AUTO_SALES_TAX_GROUPS = frozenset(
    {CategoryGroupType.INCOME, CategoryGroupType.COST_OF_SALES, CategoryGroupType.ADMIN_EXPENSES}
)

_INTEGER = re.compile(r"^\s*[+-]?\d+\s*$")


def nominal_code_range(group: CategoryGroupType) -> tuple[int, int]:
    return NOMINAL_CODE_RANGES[CategoryGroupType(group)]


def nominal_code_range_description(group: CategoryGroupType) -> str:
    """Range as FreeAgent documents it, zero padded (`"096-199"`)."""

    low, high = nominal_code_range(group)
    return f"{low:03d}-{high:03d}"


def is_valid_nominal_code_for_group(nominal_code: str, group: CategoryGroupType) -> bool:
    if not _INTEGER.match(nominal_code):
        return False
    low, high = nominal_code_range(group)
    return low <= int(nominal_code) <= high


def is_tax_reporting_name_required(group: CategoryGroupType) -> bool:
    return group in _TAX_REPORTING_NAME_REQUIRED


def is_allowable_for_tax_required(group: CategoryGroupType) -> bool:
    return group in _ALLOWABLE_FOR_TAX_REQUIRED


def can_apply_auto_sales_tax_rate(group: CategoryGroupType) -> bool:
    return group in _AUTO_SALES_TAX_GROUPS


def is_valid_auto_sales_tax_rate_for_group(
    rate: AutoSalesTaxRateType | None, group: CategoryGroupType
) -> bool:
    if rate is None:
        return True
    if rate is AutoSalesTaxRateType.EXEMPT and group is not CategoryGroupType.INCOME:
        return False
    return can_apply_auto_sales_tax_rate(group)


def validate_category_create_request(request: CategoryCreateRequest) -> list[str]:
    """Return every rule the request breaks, as human readable messages (empty when valid)."""

    group = request.category_group
    errors: list[str] = []

    if not is_valid_nominal_code_for_group(request.nominal_code, group):
        errors.append(
            f"Nominal code {request.nominal_code} is not valid for category group {group.value}. "
            f"Valid range is {nominal_code_range_description(group)}."
        )

    if is_tax_reporting_name_required(group) and not (request.tax_reporting_name or "").strip():
        errors.append(f"Tax reporting name is required for category group {group.value}.")

    if is_allowable_for_tax_required(group) and request.allowable_for_tax is None:
        errors.append(f"Allowable for tax is required for category group {group.value}.")

    if not is_valid_auto_sales_tax_rate_for_group(request.auto_sales_tax_rate, group):
        if request.auto_sales_tax_rate is AutoSalesTaxRateType.EXEMPT:
            errors.append("Auto sales tax rate 'Exempt' is only valid for income categories.")
        else:
            errors.append(f"Auto sales tax rate cannot be applied to category group {group.value}.")

    return errors


def ensure_valid_category_create_request(request: CategoryCreateRequest) -> CategoryCreateRequest:
    """Raise `CategoryValidationError` listing every broken rule; return the request otherwise."""

    errors = validate_category_create_request(request)
    if errors:
        raise CategoryValidationError(errors, resource=type(request).__name__)
    return request
