from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from hbconcat.core.interfaces.classifier import ValueClassifierProtocol
from hbconcat.core.models import Argument, Bound, Path, ValueKind
from hbconcat.errors import ClassificationError


@dataclass
class DefaultValueClassifier(ValueClassifierProtocol):
    """Classify raw call-site values into the four argument variants.

    Rules:
      - None                  → EMPTY
      - bool, int, float, str → SCALAR
      - list, tuple           → SEQUENCE
      - any Mapping           → MAPPING
      - Bound(path, value)    → classification of *value*, keeping *path*

    Anything else raises :class:`ClassificationError`.
    """

    def classify(self, raw: Any) -> Argument:
        path: Optional[Path] = None
        if isinstance(raw, Bound):
            path = tuple(raw.path)
            raw = raw.value
        return Argument(kind=self.kind_of(raw), value=raw, path=path)

    @staticmethod
    def kind_of(value: Any) -> ValueKind:
        if value is None:
            return ValueKind.EMPTY
        # bool is an int subclass; both land in SCALAR anyway.
        if isinstance(value, (str, bool, int, float)):
            return ValueKind.SCALAR
        if isinstance(value, (list, tuple)):
            return ValueKind.SEQUENCE
        if isinstance(value, Mapping):
            return ValueKind.MAPPING
        raise ClassificationError(value)
