from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from hbconcat.core.models import Options


@runtime_checkable
class OptionResolverProtocol(Protocol):
    """Turns call-site hash options into a normalized Options record."""

    def resolve(self, hash_options: Optional[Mapping[str, Any]], *, has_sub_template: bool) -> Options:
        ...
