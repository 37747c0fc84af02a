from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class ConcatEngineProtocol(Protocol):
    """Public surface of the concatenation engine."""

    def concat(
        self,
        arguments: Iterable[Any],
        options: Optional[Mapping[str, Any]] = None,
        sub_template: Any = None,
        *,
        block: Optional[bool] = None,
        root: Any = None,
    ) -> str:
        """Join *arguments* into a single string."""
        ...

    def concat_to(
        self,
        sink: TextIO,
        arguments: Iterable[Any],
        options: Optional[Mapping[str, Any]] = None,
        sub_template: Any = None,
        *,
        block: Optional[bool] = None,
        root: Any = None,
    ) -> str:
        """Join *arguments* and write the result to *sink*."""
        ...
