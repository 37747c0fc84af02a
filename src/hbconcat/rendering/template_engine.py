"""
template_engine – Handlebars collaborator for hbconcat, backed by pybars3.

The concat engine never parses or evaluates templates itself. This module
supplies the default implementation of ``TemplateEngineProtocol``:

  • compile(source)              → pybars compiled template
  • render_scoped(fragment, scope) → template evaluated with ``scope.value``
                                     as ``this`` and ``scope.root`` as @root
  • stringify(value)             → Handlebars literal text (see stringify.py)
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, Optional

from pybars import Compiler, Scope

from hbconcat.core.interfaces.templating import TemplateEngineProtocol
from hbconcat.core.models import Path, RenderScope
from hbconcat.errors import RenderError
from hbconcat.rendering.stringify import json_render

_MISSING = object()


def resolve_path(root: Any, path: Path) -> Any:
    """Walk *path* from *root*; return ``_MISSING`` when a segment is absent."""
    node = root
    for segment in path:
        if isinstance(node, Mapping):
            if segment not in node:
                return _MISSING
            node = node[segment]
        elif isinstance(node, Sequence) and not isinstance(node, str) and str(segment).isdigit():
            idx = int(segment)
            if idx >= len(node):
                return _MISSING
            node = node[idx]
        else:
            return _MISSING
    return node


class PybarsTemplateEngine(TemplateEngineProtocol):
    """Handlebars template engine using :class:`pybars.Compiler`.

    Helpers and partials registered on the instance are forwarded to every
    render call. Scopes carrying a lookup path are re-resolved from the
    root so the fragment sees the value exactly as the host bound it;
    scopes without a path use their value as-is.
    """

    def __init__(
        self,
        *,
        compiler: Optional[Compiler] = None,
        helpers: Optional[Dict[str, Callable[..., Any]]] = None,
        partials: Optional[Dict[str, Callable[..., Any]]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._compiler = compiler or Compiler()
        self._helpers: Dict[str, Callable[..., Any]] = dict(helpers or {})
        self._partials: Dict[str, Callable[..., Any]] = dict(partials or {})
        self._log = logger or logging.getLogger("hbconcat.templates")

    def register_helper(self, name: str, helper: Callable[..., Any]) -> None:
        self._helpers[name] = helper

    def register_partial(self, name: str, source: str) -> None:
        self._partials[name] = self.compile(source)

    def compile(self, source: str) -> Callable[..., Any]:
        """Compile *source* into a pybars template."""
        try:
            return self._compiler.compile(source)
        except Exception as exc:  # noqa: BLE001
            self._log.error("template compilation failed: %s", exc)
            raise RenderError(f"cannot compile template: {exc}") from exc

    def render_scoped(self, fragment: Callable[..., Any], scope: RenderScope) -> str:  # type: ignore[override]
        """Evaluate *fragment* against *scope* and return the produced text."""
        context = scope.value
        if scope.path is not None and scope.root is not None:
            resolved = resolve_path(scope.root, scope.path)
            if resolved is not _MISSING:
                context = resolved
        root = scope.root if scope.root is not None else context

        try:
            out = fragment(
                Scope(context, context, root),
                helpers=self._helpers,
                partials=self._partials,
                root=root,
            )
        except Exception as exc:  # noqa: BLE001
            raise RenderError(f"template rendering failed: {exc}") from exc

        # pybars returns a strlist (a list of chunks) on some releases.
        if isinstance(out, str):
            return out
        return "".join(out)

    def stringify(self, value: Any) -> str:
        return json_render(value)
