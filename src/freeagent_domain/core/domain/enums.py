"""Enumerations of the FreeAgent API and their wire converters.

Each enum member's value is the literal the API sends and expects. Decoding
goes through a `WireEnumConverter`, which owns the lookup table and the
normalisation rule of that vocabulary (some are case-insensitive, some ignore
separators, some are exact). Encoding always writes `member.value`.

Model fields use the `Annotated` aliases at the bottom of this module
(`OptionalCompanyType`, `OptionalRole`, ...), so the converter is applied both on
validation and on serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Callable, Generic, TypeVar

from pydantic import BeforeValidator, PlainSerializer, ValidationInfo
from pydantic_core import PydanticCustomError

E = TypeVar("E", bound=Enum)


class SalesTaxRegistrationStatus(str, Enum):
    NOT_REGISTERED = "Not Registered"
    REGISTERED = "Registered"


class CorporationTaxFilingStatus(str, Enum):
    DRAFT = "draft"
    UNFILED = "unfiled"
    PENDING = "pending"
    REJECTED = "rejected"
    FILED = "filed"
    MARKED_AS_FILED = "marked_as_filed"


class FinalAccountsFilingStatus(str, Enum):
    DRAFT = "draft"
    UNFILED = "unfiled"
    PENDING = "pending"
    REJECTED = "rejected"
    FILED = "filed"
    MARKED_AS_FILED = "marked_as_filed"


class CorporationTaxPaymentStatus(str, Enum):
    UNPAID = "unpaid"
    MARKED_AS_PAID = "marked_as_paid"


class CompanyType(str, Enum):
    """Legal structure of the company owning the FreeAgent account."""

    UK_LIMITED_COMPANY = "UkLimitedCompany"
    UK_LIMITED_LIABILITY_PARTNERSHIP = "UkLimitedLiabilityPartnership"
    UK_PARTNERSHIP = "UkPartnership"
    UK_SOLE_TRADER = "UkSoleTrader"
    UK_UNINCORPORATED_LANDLORD = "UkUnincorporatedLandlord"
    US_LIMITED_LIABILITY_COMPANY = "UsLimitedLiabilityCompany"
    US_PARTNERSHIP = "UsPartnership"
    US_SOLE_PROPRIETOR = "UsSoleProprietor"
    US_C_CORP = "UsCCorp"
    US_S_CORP = "UsSCorp"
    UNIVERSAL_COMPANY = "UniversalCompany"

    def is_uk(self) -> bool:
        return self.value.startswith("Uk")


class Role(str, Enum):
    """Role of a user within the company."""

    OWNER = "owner"
    DIRECTOR = "director"
    PARTNER = "partner"
    COMPANY_SECRETARY = "company_secretary"
    EMPLOYEE = "employee"
    SHAREHOLDER = "shareholder"
    ACCOUNTANT = "accountant"


class RebillType(str, Enum):
    COST = "cost"
    MARKUP = "markup"
    PRICE = "price"


class CategoryGroupType(str, Enum):
    """Accounting group a custom category is created under."""

    INCOME = "income"
    COST_OF_SALES = "cost_of_sales"
    ADMIN_EXPENSES = "admin_expenses"
    CURRENT_ASSETS = "current_assets"
    LIABILITIES = "liabilities"
    EQUITIES = "equities"


class AutoSalesTaxRateType(str, Enum):
    OUTSIDE_SCOPE = "Outside of the scope of VAT"
    ZERO_RATE = "Zero rate"
    REDUCED_RATE = "Reduced rate"
    STANDARD_RATE = "Standard rate"
    EXEMPT = "Exempt"


class EcStatus(str, Enum):
    UK_NON_EC = "UK/Non-EC"
    EC_GOODS = "EC Goods"
    EC_SERVICES = "EC Services"
    REVERSE_CHARGE = "Reverse Charge"
    EC_VAT_MOSS = "EC VAT MOSS"


class EngineType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    LPG = "LPG"
    ELECTRIC = "Electric"
    ELECTRIC_HOME_CHARGER = "Electric (Home charger)"
    ELECTRIC_PUBLIC_CHARGER = "Electric (Public charger)"


class RecurringPattern(str, Enum):
    WEEKLY = "Weekly"
    TWO_WEEKLY = "Two Weekly"
    FOUR_WEEKLY = "Four Weekly"
    MONTHLY = "Monthly"
    TWO_MONTHLY = "Two Monthly"
    QUARTERLY = "Quarterly"
    BIANNUALLY = "Biannually"
    ANNUALLY = "Annually"
    TWO_YEARLY = "2-Yearly"


class SalesTaxStatus(str, Enum):
    TAXABLE = "TAXABLE"
    EXEMPT = "EXEMPT"
    OUT_OF_SCOPE = "OUT_OF_SCOPE"


class VehicleType(str, Enum):
    CAR = "Car"
    MOTORCYCLE = "Motorcycle"
    BICYCLE = "Bicycle"


class VatBasis:
    """Accounting basis values accepted for VAT (plain strings on the wire)."""

    INVOICE = "Invoice"
    CASH = "Cash"

    @classmethod
    def valid_values(cls) -> tuple[str, ...]:
        return (cls.INVOICE, cls.CASH)

    @classmethod
    def is_valid(cls, value: str | None) -> bool:
        return value in cls.valid_values()


class ExpenseAttachmentContentType:
    """MIME types FreeAgent accepts for expense receipts."""

    PNG = "image/png"
    X_PNG = "image/x-png"
    JPEG = "image/jpeg"
    JPG = "image/jpg"
    GIF = "image/gif"
    PDF = "application/x-pdf"

    @classmethod
    def all(cls) -> tuple[str, ...]:
        return (cls.PNG, cls.X_PNG, cls.JPEG, cls.JPG, cls.GIF, cls.PDF)


class WireEnumConverter(Generic[E]):
    """Bidirectional map between API literals and enum members.

    `normalize` is applied to both the table keys and the incoming literal, so
    a case-insensitive vocabulary only needs `str.lower`. `aliases` adds extra
    accepted spellings without changing what gets encoded.
    """

    def __init__(
        self,
        enum_cls: type[E],
        *,
        normalize: Callable[[str], str] | None = None,
        aliases: dict[str, E] | None = None,
    ) -> None:
        self.enum_cls = enum_cls
        self._normalize = normalize or (lambda literal: literal)
        self._table: dict[str, E] = {self._normalize(m.value): m for m in enum_cls}
        for literal, member in (aliases or {}).items():
            self._table[self._normalize(literal)] = member

    def lookup(self, literal: str) -> E | None:
        return self._table.get(self._normalize(literal))

    def decode(self, value: Any, info: ValidationInfo) -> E | None:
        if value is None or isinstance(value, self.enum_cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "enum_literal_type",
                "Expected a string literal for {enum_name}, got {actual}",
                {"enum_name": self.enum_cls.__name__, "actual": type(value).__name__},
            )
        # The API sends "" for unset vocabularies.
        if value == "":
            return None
        member = self.lookup(value)
        if member is None:
            raise PydanticCustomError(
                "unknown_enum_literal",
                "Unknown {enum_name} literal '{literal}' for field {field}",
                {
                    "enum_name": self.enum_cls.__name__,
                    "literal": value,
                    "field": info.field_name or "<root>",
                },
            )
        return member

    def encode(self, member: E | None) -> str | None:
        if member is None:
            return None
        return self.enum_cls(member).value

    def literals(self) -> tuple[str, ...]:
        return tuple(m.value for m in self.enum_cls)


def _lower(literal: str) -> str:
    return literal.lower()


def _upper(literal: str) -> str:
    return literal.upper()


def _lower_without_underscores(literal: str) -> str:
    return literal.lower().replace("_", "")


def _lower_without_separators(literal: str) -> str:
    return literal.replace("_", "").replace("-", "").lower()


CONVERTERS: dict[type[Enum], WireEnumConverter[Any]] = {
    SalesTaxRegistrationStatus: WireEnumConverter(SalesTaxRegistrationStatus, normalize=_lower),
    CorporationTaxFilingStatus: WireEnumConverter(CorporationTaxFilingStatus, normalize=_lower),
    FinalAccountsFilingStatus: WireEnumConverter(FinalAccountsFilingStatus, normalize=_lower),
    CorporationTaxPaymentStatus: WireEnumConverter(CorporationTaxPaymentStatus, normalize=_lower),
    CompanyType: WireEnumConverter(CompanyType, normalize=_lower_without_underscores),
    Role: WireEnumConverter(Role, normalize=_lower_without_separators),
    RebillType: WireEnumConverter(RebillType, normalize=_lower),
    CategoryGroupType: WireEnumConverter(CategoryGroupType),
    AutoSalesTaxRateType: WireEnumConverter(AutoSalesTaxRateType),
    EcStatus: WireEnumConverter(EcStatus),
    EngineType: WireEnumConverter(EngineType),
    RecurringPattern: WireEnumConverter(RecurringPattern),
    SalesTaxStatus: WireEnumConverter(SalesTaxStatus, normalize=_upper),
    VehicleType: WireEnumConverter(VehicleType),
}


def converter_for(enum_cls: type[E]) -> WireEnumConverter[E]:
    return CONVERTERS[enum_cls]


def _wire(enum_cls: type[Enum], *, optional: bool = True) -> Any:
    converter = CONVERTERS[enum_cls]
    target: Any = enum_cls | None if optional else enum_cls
    return Annotated[
        target,
        BeforeValidator(converter.decode),
        PlainSerializer(converter.encode),
    ]


OptionalSalesTaxRegistrationStatus = _wire(SalesTaxRegistrationStatus)
CorporationTaxFilingStatusValue = _wire(CorporationTaxFilingStatus, optional=False)
FinalAccountsFilingStatusValue = _wire(FinalAccountsFilingStatus, optional=False)
OptionalCorporationTaxPaymentStatus = _wire(CorporationTaxPaymentStatus)
OptionalCompanyType = _wire(CompanyType)
OptionalRole = _wire(Role)
OptionalRebillType = _wire(RebillType)
CategoryGroupTypeValue = _wire(CategoryGroupType, optional=False)
OptionalAutoSalesTaxRateType = _wire(AutoSalesTaxRateType)
OptionalEcStatus = _wire(EcStatus)
OptionalEngineType = _wire(EngineType)
OptionalRecurringPattern = _wire(RecurringPattern)
OptionalSalesTaxStatus = _wire(SalesTaxStatus)
OptionalVehicleType = _wire(VehicleType)
