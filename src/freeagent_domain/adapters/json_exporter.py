"""Exportación JSON de registros y envelopes.

Por qué JSON en disco:
- Permite guardar fixtures/respuestas de la API y re-validarlas luego con
  `freeagent-domain validate`.
- Reutiliza el codec, así el archivo tiene exactamente el wire format.
"""

from __future__ import annotations

import json
from pathlib import Path

from freeagent_domain.adapters.json_codec import encode
from freeagent_domain.core.domain.base import FreeAgentModel


def export_record_json(*, record: FreeAgentModel, output_path: Path, indent: int | None = 2) -> Path:
    """Exporta `record` a JSON UTF-8 con formato estable (claves ordenadas)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = encode(record)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=indent, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
