"""
Element renderer for hbconcat.

Decides, for every element of a classified argument, whether its text is
the default literal form or the output of the sub-template, then applies
the emptiness filter and quotation marks.

Decision table
--------------
• Scalar          → literal text; sub-rendered only with a sub-template AND
                    ``render_all``, scoped to the argument's own lookup path
                    when it has one.
• Sequence item   → literal text; sub-rendered only with a sub-template AND
                    ``render_all``, always scoped to the item value.
• Mapping         → with a sub-template every *value* is sub-rendered
                    (``render_all`` not required); without one only the
                    *keys* contribute and values are ignored.

Items of sequences and values of mappings are classified like top-level
arguments, so an unsupported value raises ClassificationError.

Emptiness is checked before quoting, so an empty element never shows up as
a bare pair of quotation marks.
"""

import logging
from typing import Any, Iterator, Optional

from hbconcat.core.interfaces.classifier import ValueClassifierProtocol
from hbconcat.core.interfaces.templating import TemplateEngineProtocol
from hbconcat.core.models import Argument, Options, RenderScope, ValueKind
from hbconcat.errors import ClassificationError, EngineError, RenderError
from hbconcat.logging.helpers import trace_io
from hbconcat.processing.value_classifier import DefaultValueClassifier


def apply_quotes(text: str, mark: str) -> str:
    """Wrap *text* in *mark* on both sides (no-op for an empty mark)."""
    if not mark:
        return text
    return f"{mark}{text}{mark}"


class ElementRenderer:
    """Produce the final, quoted texts of one argument in element order."""

    def __init__(
        self,
        *,
        template_engine: TemplateEngineProtocol,
        classifier: Optional[ValueClassifierProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._engine = template_engine
        self._classifier: ValueClassifierProtocol = classifier or DefaultValueClassifier()
        self._log = logger or logging.getLogger("hbconcat.render")

    def render(
        self,
        arg: Argument,
        options: Options,
        fragment: Any = None,
        *,
        root: Any = None,
    ) -> Iterator[str]:
        """Yield the texts *arg* contributes, lazily and in order.

        Laziness matters: the caller offers each text to the accumulator
        before the next element is rendered.
        """
        use_template = options.has_sub_template and options.render_all

        if arg.kind is ValueKind.EMPTY:
            return

        if arg.kind is ValueKind.SCALAR:
            if use_template:
                text = self._sub_render(fragment, RenderScope.for_argument(arg, root))
            else:
                text = self._engine.stringify(arg.value)
            yield from self._finish(text, options)

        elif arg.kind is ValueKind.SEQUENCE:
            for item in arg.value:
                self._classifier.classify(item)
                if use_template:
                    text = self._sub_render(fragment, RenderScope.for_value(item, root))
                else:
                    text = self._engine.stringify(item)
                yield from self._finish(text, options)

        elif arg.kind is ValueKind.MAPPING:
            if options.has_sub_template:
                for value in arg.value.values():
                    self._classifier.classify(value)
                    text = self._sub_render(fragment, RenderScope.for_value(value, root))
                    yield from self._finish(text, options)
            else:
                for key in arg.value.keys():
                    yield from self._finish(self._engine.stringify(key), options)

        else:
            raise ClassificationError(arg.value)

    def _sub_render(self, fragment: Any, scope: RenderScope) -> str:
        # Block call without a body: nothing to evaluate.
        if fragment is None:
            return ""
        try:
            text = self._engine.render_scoped(fragment, scope)
        except EngineError:
            self._log.error("sub-template rendering failed for scope path=%r", scope.path)
            raise
        except Exception as exc:  # noqa: BLE001
            self._log.error("sub-template rendering failed: %s", exc)
            raise RenderError(f"sub-template rendering failed: {exc}") from exc
        trace_io(self._log, "sub-rendered element", path=scope.path, text=text)
        return text

    @staticmethod
    def _finish(text: str, options: Options) -> Iterator[str]:
        if not text:
            return
        yield apply_quotes(text, options.quotation_mark)
