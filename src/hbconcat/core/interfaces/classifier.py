from __future__ import annotations
from typing import Any, Protocol, runtime_checkable

from hbconcat.core.models import Argument


@runtime_checkable
class ValueClassifierProtocol(Protocol):
    """Tags one raw call-site value as empty, scalar, sequence or mapping."""

    def classify(self, raw: Any) -> Argument:
        """Return the classified argument or raise ClassificationError."""
        ...
