"""Errores del dominio.

Por qué una jerarquía propia:
- Los consumidores (cliente HTTP, CLI) capturan `FreeAgentDomainError` sin
  depender de los tipos internos de Pydantic.
- Cada error conserva recurso, campo y valor ofensivo para poder diagnosticar
  el payload sin volver a parsearlo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldIssue:
    """One problem found while decoding a payload."""

    path: str
    message: str
    kind: str
    value: Any = None

    def describe(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class FreeAgentDomainError(Exception):
    """Base de todos los errores del layer de modelos."""

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.resource = resource
        self.details = details or {}

    def __str__(self) -> str:
        if self.resource:
            return f"{self.resource}: {self.message}"
        return self.message


class PayloadDecodeError(FreeAgentDomainError):
    """The payload is not valid JSON or does not match the resource shape."""

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        issues: tuple[FieldIssue, ...] = (),
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, resource=resource, details=details)
        self.issues = issues

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(issue.path for issue in self.issues)


class MissingFieldError(PayloadDecodeError):
    """At least one required field is absent from the payload."""


class UnknownEnumLiteralError(PayloadDecodeError):
    """A literal that is not part of the enum's vocabulary."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        literal: str,
        enum_name: str,
        resource: str | None = None,
        issues: tuple[FieldIssue, ...] = (),
    ) -> None:
        super().__init__(
            message,
            resource=resource,
            issues=issues,
            details={"field": field, "literal": literal, "enum": enum_name},
        )
        self.field = field
        self.literal = literal
        self.enum_name = enum_name


class PayloadEncodeError(FreeAgentDomainError):
    """A record could not be rendered as JSON."""


class CategoryValidationError(FreeAgentDomainError):
    """A category create/update request breaks FreeAgent's category rules."""

    def __init__(self, errors: list[str], *, resource: str | None = None) -> None:
        super().__init__("; ".join(errors), resource=resource, details={"errors": list(errors)})
        self.errors = tuple(errors)


class ConfigurationError(FreeAgentDomainError):
    """Settings are incomplete for the external client (missing credentials)."""
