"""JSON rendering of a conversion.

Why JSON:
- Lets scripts consume `baseconv convert --json` without scraping text.
- The canonical `value` travels next to the formatted `output`.
"""

from __future__ import annotations

import json

from core.domain.models import Conversion


def render_conversion_json(conversion: Conversion) -> str:
    """Serialize `Conversion` to JSON with a stable key order."""

    payload = conversion.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
