"""JSON codec for FreeAgent records and envelopes.

Por qué un codec propio encima de Pydantic:
- Los números JSON se leen como `Decimal` (nunca `float`), así un importe
  `1234.56` no pierde precisión antes de llegar al modelo.
- Traduce `ValidationError` a la jerarquía de `core.errors`, con recurso,
  ruta del campo y valor ofensivo, para que el cliente HTTP no dependa de
  los tipos internos de Pydantic.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeVar

import structlog
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from freeagent_domain.core.domain.base import FreeAgentModel
from freeagent_domain.core.errors import (
    FieldIssue,
    MissingFieldError,
    PayloadDecodeError,
    PayloadEncodeError,
    UnknownEnumLiteralError,
)

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=FreeAgentModel)


def _issue_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _issues_from(exc: ValidationError) -> tuple[FieldIssue, ...]:
    issues = []
    for error in exc.errors(include_url=False):
        kind = error["type"]
        # `missing` reports the whole parent object as input; keep it out.
        value = None if kind == "missing" else error.get("input")
        issues.append(
            FieldIssue(
                path=_issue_path(error["loc"]),
                message=error["msg"],
                kind=kind,
                value=value,
            )
        )
    return tuple(issues)


def translate_validation_error(exc: ValidationError, resource: str) -> PayloadDecodeError:
    """Map a pydantic `ValidationError` onto the domain error taxonomy."""

    issues = _issues_from(exc)
    summary = "; ".join(issue.describe() for issue in issues)
    message = f"Cannot decode {resource}: {summary}"

    for error in exc.errors(include_url=False):
        if error["type"] == "unknown_enum_literal":
            ctx = error.get("ctx") or {}
            return UnknownEnumLiteralError(
                message,
                field=str(ctx.get("field") or _issue_path(error["loc"])),
                literal=str(ctx.get("literal", error.get("input"))),
                enum_name=str(ctx.get("enum_name", "")),
                resource=resource,
                issues=issues,
            )

    if any(issue.kind == "missing" for issue in issues):
        missing = [issue.path for issue in issues if issue.kind == "missing"]
        return MissingFieldError(message, resource=resource, issues=issues, details={"missing": missing})

    return PayloadDecodeError(message, resource=resource, issues=issues)


def parse_json(text: str | bytes, *, resource: str = "payload") -> Any:
    """`json.loads` with decimal numbers; malformed JSON raises `PayloadDecodeError`."""

    try:
        return json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        logger.debug("codec.json_invalid", resource=resource, line=exc.lineno, column=exc.colno)
        raise PayloadDecodeError(
            f"Cannot decode {resource}: invalid JSON ({exc.msg} at line {exc.lineno} column {exc.colno})",
            resource=resource,
            issues=(FieldIssue(path="", message=exc.msg, kind="json_invalid"),),
            details={"line": exc.lineno, "column": exc.colno},
        ) from exc


def decode(model: type[M], payload: Mapping[str, Any]) -> M:
    """Validate an already-parsed JSON object as `model`."""

    resource = model.__name__
    if not isinstance(payload, Mapping):
        raise PayloadDecodeError(
            f"Cannot decode {resource}: expected a JSON object, got {type(payload).__name__}",
            resource=resource,
            issues=(
                FieldIssue(path="", message="Expected a JSON object", kind="model_type", value=payload),
            ),
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        error = translate_validation_error(exc, resource)
        logger.debug(
            "codec.decode_failed",
            resource=resource,
            error_type=type(error).__name__,
            issues=[issue.describe() for issue in error.issues],
        )
        raise error from exc


def loads(model: type[M], text: str | bytes) -> M:
    """Parse JSON text and decode it as `model`."""

    return decode(model, parse_json(text, resource=model.__name__))


def encode(record: FreeAgentModel) -> dict[str, Any]:
    """JSON-ready dict with wire keys (decimals as strings, dates as `yyyy-MM-dd`)."""

    try:
        return record.model_dump(mode="json", by_alias=True)
    except PydanticSerializationError as exc:
        resource = type(record).__name__
        logger.debug("codec.encode_failed", resource=resource, error=str(exc))
        raise PayloadEncodeError(f"Cannot encode {resource}: {exc}", resource=resource) from exc


def dumps(record: FreeAgentModel, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Serialize `record` to JSON text."""

    return json.dumps(encode(record), ensure_ascii=False, indent=indent, sort_keys=sort_keys)
