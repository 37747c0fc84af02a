"""
stringify – Canonical literal text form of JSON-like values.

Rules mirror what Handlebars prints for a bare ``{{value}}``:

  • str          → verbatim
  • bool         → "true" / "false"
  • int / float  → JSON number text ("1", "1.5", "1.0"); exponents carry
                   no "+" sign and no leading zeros ("1e20", "1e-7")
  • None         → ""
  • list / tuple → "[a, b]" with every item rendered by these rules
  • mapping      → "[object]"

Any other value raises :class:`ClassificationError`.
"""

import json
from collections.abc import Mapping
from typing import Any

from hbconcat.errors import ClassificationError


def _number_text(value: Any) -> str:
    text = json.dumps(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    return f"{mantissa}e{int(exponent)}"


def json_render(value: Any) -> str:
    """Return the literal text of *value*."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number_text(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(json_render(item) for item in value) + "]"
    if isinstance(value, Mapping):
        return "[object]"
    raise ClassificationError(value)
