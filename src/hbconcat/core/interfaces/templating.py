from __future__ import annotations
from typing import Any, Protocol, runtime_checkable

from hbconcat.core.models import RenderScope


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Host templating collaborator consumed by the concat engine.

    The engine never interprets template text itself; it only asks the
    collaborator to compile a fragment, to evaluate it against a scope and
    to print scalars in their canonical literal form.
    """

    def compile(self, source: str) -> Any:
        """Compile *source* into an opaque fragment accepted by `render_scoped`."""
        ...

    def render_scoped(self, fragment: Any, scope: RenderScope) -> str:
        """Evaluate *fragment* with *scope* as the implicit ``this`` value."""
        ...

    def stringify(self, value: Any) -> str:
        """Return the literal text form of *value*."""
        ...
