"""Tests for custom category creation rules."""

from __future__ import annotations

import pytest

from freeagent_domain.core.domain import CategoryCreateRequest
from freeagent_domain.core.domain.enums import AutoSalesTaxRateType, CategoryGroupType
from freeagent_domain.core.domain.validation import (
    can_apply_auto_sales_tax_rate,
    ensure_valid_category_create_request,
    is_valid_nominal_code_for_group,
    nominal_code_range_description,
    validate_category_create_request,
)
from freeagent_domain.core.errors import CategoryValidationError


def _request(**overrides) -> CategoryCreateRequest:
    values = {
        "nominal_code": "250",
        "description": "Software",
        "category_group": "admin_expenses",
        "tax_reporting_name": "Software",
        "allowable_for_tax": True,
    }
    values.update(overrides)
    return CategoryCreateRequest.model_validate(values)


class TestNominalCodes:
    """Nominal code ranges per group."""

    @pytest.mark.parametrize(
        ("group", "expected"),
        [
            (CategoryGroupType.INCOME, "001-049"),
            (CategoryGroupType.COST_OF_SALES, "096-199"),
            (CategoryGroupType.ADMIN_EXPENSES, "200-399"),
            (CategoryGroupType.CURRENT_ASSETS, "671-720"),
            (CategoryGroupType.LIABILITIES, "731-780"),
            (CategoryGroupType.EQUITIES, "921-960"),
        ],
    )
    def test_range_description(self, group: CategoryGroupType, expected: str) -> None:
        """Ranges render zero padded."""
        assert nominal_code_range_description(group) == expected

    def test_bounds_are_inclusive(self) -> None:
        """Both ends of a range are valid; one past is not."""
        assert is_valid_nominal_code_for_group("096", CategoryGroupType.COST_OF_SALES)
        assert is_valid_nominal_code_for_group("199", CategoryGroupType.COST_OF_SALES)
        assert not is_valid_nominal_code_for_group("200", CategoryGroupType.COST_OF_SALES)

    def test_non_numeric_code_is_invalid(self) -> None:
        """Letters are never a valid nominal code."""
        assert not is_valid_nominal_code_for_group("ABC", CategoryGroupType.INCOME)


class TestCreateRequestRules:
    """validate_category_create_request lists every broken rule."""

    def test_valid_request_has_no_errors(self) -> None:
        """An admin expense with every required field passes."""
        request = _request(auto_sales_tax_rate="Standard rate")

        assert validate_category_create_request(request) == []
        assert ensure_valid_category_create_request(request) is request

    def test_out_of_range_code(self) -> None:
        """The message names the group literal and the valid range."""
        errors = validate_category_create_request(_request(nominal_code="050"))

        assert errors == [
            "Nominal code 050 is not valid for category group admin_expenses. Valid range is 200-399."
        ]

    def test_missing_group_specific_fields(self) -> None:
        """Cost of sales needs a tax reporting name and allowable_for_tax."""
        request = _request(
            nominal_code="150",
            category_group="cost_of_sales",
            tax_reporting_name="  ",
            allowable_for_tax=None,
        )

        assert validate_category_create_request(request) == [
            "Tax reporting name is required for category group cost_of_sales.",
            "Allowable for tax is required for category group cost_of_sales.",
        ]

    def test_income_needs_neither_field(self) -> None:
        """Income categories only need a code in range."""
        request = CategoryCreateRequest.model_validate(
            {"nominal_code": "010", "description": "Sales", "category_group": "income", "auto_sales_tax_rate": "Exempt"}
        )

        assert validate_category_create_request(request) == []

    def test_exempt_rate_only_for_income(self) -> None:
        """Exempt on an admin expense is rejected with its own message."""
        errors = validate_category_create_request(_request(auto_sales_tax_rate="Exempt"))

        assert errors == ["Auto sales tax rate 'Exempt' is only valid for income categories."]

    def test_auto_rate_not_applicable_to_balance_sheet_groups(self) -> None:
        """Equities cannot carry an auto sales tax rate."""
        request = _request(nominal_code="930", category_group="equities", auto_sales_tax_rate="Zero rate")

        assert not can_apply_auto_sales_tax_rate(CategoryGroupType.EQUITIES)
        assert validate_category_create_request(request) == [
            "Auto sales tax rate cannot be applied to category group equities."
        ]

    def test_ensure_raises_with_all_messages(self) -> None:
        """CategoryValidationError carries every message."""
        request = _request(nominal_code="999", auto_sales_tax_rate=AutoSalesTaxRateType.EXEMPT)

        with pytest.raises(CategoryValidationError) as excinfo:
            ensure_valid_category_create_request(request)

        assert len(excinfo.value.errors) == 2
        assert excinfo.value.resource == "CategoryCreateRequest"
