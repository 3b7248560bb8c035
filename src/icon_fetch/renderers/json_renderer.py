"""JSON renderer for scripting and export."""

import json
import sys

from ..models import BrandAnalysis, LookupRecord
from .base import BaseRenderer


class JSONRenderer(BaseRenderer):
    """Renders lookups and history as JSON on stdout, using the storage field names."""

    def render_lookup(self, record: LookupRecord, analysis: BrandAnalysis | None) -> None:
        output = {
            **record.to_dict(),
            "analysis": analysis.to_dict() if analysis else None,
        }
        self._dump(output)

    def render_history(self, records: list[LookupRecord]) -> None:
        self._dump([record.to_dict() for record in records])

    @staticmethod
    def _dump(data: object) -> None:
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        print()  # Newline at end
