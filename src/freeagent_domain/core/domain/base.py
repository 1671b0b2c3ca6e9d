"""Base de los registros del dominio (Pydantic v2).

Por qué una base común:
- Todos los recursos de FreeAgent comparten las mismas reglas de wire format:
  inmutables, campos desconocidos ignorados, claves snake_case fijas.
- La regla "omitir si ausente" se declara por clase (`omit_when_none`) y se
  aplica en un único serializer, en vez de repetirla en cada modelo.

Nota:
- Los envelopes (roots) también heredan de aquí; ver `Envelope`.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import (
    AnyUrl,
    BaseModel,
    BeforeValidator,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictBool,
    model_serializer,
)
from pydantic.config import ConfigDict

T = TypeVar("T")


def _none_as_empty(value: Any) -> Any:
    return () if value is None else value


# Wire-level scalar aliases. Every attribute stays independently optional.
# Booleans are strict: "yes", "1" or 1 are type mismatches, never True.
Flag = StrictBool
Money = Decimal
ResourceUrl = AnyUrl
Many = Annotated[tuple[T, ...], BeforeValidator(_none_as_empty)]


class FreeAgentModel(BaseModel):
    """Registro inmutable de la API de FreeAgent.

    - `omit_when_none = True`: cualquier campo ausente desaparece del JSON.
    - `omit_when_none = frozenset({...})`: solo esos atributos se omiten.
    - `omit_when_none = False`: los ausentes se emiten como `null`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    omit_when_none: ClassVar[bool | frozenset[str]] = False

    @classmethod
    def omitted_fields(cls) -> frozenset[str]:
        """Attribute names dropped from the payload when they hold `None`."""

        if cls.omit_when_none is True:
            return frozenset(cls.model_fields)
        if cls.omit_when_none is False:
            return frozenset()
        return frozenset(cls.omit_when_none)

    @classmethod
    def wire_key(cls, name: str) -> str:
        """Return the JSON key used on the wire for attribute `name`."""

        field = cls.model_fields[name]
        return field.alias or name

    @model_serializer(mode="wrap")
    def _drop_absent(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        cls = type(self)
        for name in cls.omitted_fields():
            key = cls.wire_key(name) if info.by_alias else name
            if key in data and data[key] is None:
                data.pop(key)
        return data

    def with_changes(self, **changes: Any) -> FreeAgentModel:
        """Copia validada con los cambios aplicados (el original no se toca)."""

        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self).model_validate(values)


class Envelope(FreeAgentModel):
    """Top-level JSON wrapper (`{"contacts": [...]}` / `{"contact": {...}}`)."""

    @classmethod
    def wire_keys(cls) -> tuple[str, ...]:
        return tuple(cls.wire_key(name) for name in cls.model_fields)


class Link(FreeAgentModel):
    """Pagination link parsed from a `Link` header (`rel` + `uri`)."""

    rel: str = Field(..., min_length=1, description="Relación del enlace (next, prev, first, last).")
    uri: AnyUrl = Field(..., description="URI absoluta de la página referenciada.")
