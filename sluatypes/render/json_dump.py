"""JSON dumps of the catalogue and the type-system document."""

from __future__ import annotations

import json

from sluatypes.catalogue import Catalogue, catalogue_to_data
from sluatypes.slua import TypeSystemDocument, document_to_data


def render_lsl_json(catalogue: Catalogue) -> str:
    return json.dumps(catalogue_to_data(catalogue), indent=2, ensure_ascii=False)


def render_slua_json(document: TypeSystemDocument) -> str:
    return json.dumps(document_to_data(document), indent=2, ensure_ascii=False)
