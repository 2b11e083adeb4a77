"""Escritura del manifest inicial (`package.json`).

Formato:
- JSON con indentación de 2 espacios, en el orden de campos del modelo.
- Termina con el separador de línea de la plataforma.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from appseed.core.domain.models import ManifestRecord

MANIFEST_FILENAME = "package.json"


def write_manifest(*, record: ManifestRecord, root: Path) -> Path:
    """Escribe `record` en `<root>/package.json` y devuelve la ruta."""

    output_path = root / MANIFEST_FILENAME
    payload = record.model_dump(mode="json")
    # newline="" evita que Windows duplique el \r de os.linesep.
    with output_path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(json.dumps(payload, ensure_ascii=False, indent=2) + os.linesep)
    return output_path
