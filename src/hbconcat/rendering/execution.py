from __future__ import annotations
import logging
from typing import Any, Iterable, Mapping, Optional, TextIO

from hbconcat.core.interfaces.classifier import ValueClassifierProtocol
from hbconcat.core.interfaces.engine import ConcatEngineProtocol
from hbconcat.core.interfaces.options import OptionResolverProtocol
from hbconcat.core.interfaces.templating import TemplateEngineProtocol
from hbconcat.errors import WriteError
from hbconcat.logging.helpers import get_logger, trace_io
from hbconcat.processing.option_resolver import OptionResolver
from hbconcat.processing.value_classifier import DefaultValueClassifier
from hbconcat.rendering.accumulator import OutputAccumulator
from hbconcat.rendering.element_renderer import ElementRenderer


class ConcatEngine(ConcatEngineProtocol):
    """Join heterogeneous arguments into one string.

    One call is a single linear pass: resolve options, then for every
    argument classify it, render its elements and offer each text to the
    accumulator, then join. The engine holds no per-call state, so a single
    instance may serve concurrent calls.
    """

    def __init__(
        self,
        *,
        template_engine: TemplateEngineProtocol,
        classifier: Optional[ValueClassifierProtocol] = None,
        option_resolver: Optional[OptionResolverProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tpl_engine = template_engine
        self._log = logger or get_logger("engine")
        self._classifier: ValueClassifierProtocol = classifier or DefaultValueClassifier()
        self._options: OptionResolverProtocol = option_resolver or OptionResolver(
            render_value=template_engine.stringify
        )
        self._renderer = ElementRenderer(
            template_engine=template_engine, classifier=self._classifier, logger=self._log
        )

    @property
    def template_engine(self) -> TemplateEngineProtocol:
        return self._tpl_engine

    def compile(self, source: str) -> Any:
        """Compile *source* with the template engine into a sub-template."""
        return self._tpl_engine.compile(source)

    def concat(
        self,
        arguments: Iterable[Any],
        options: Optional[Mapping[str, Any]] = None,
        sub_template: Any = None,
        *,
        block: Optional[bool] = None,
        root: Any = None,
    ) -> str:
        """Return the joined text of *arguments*.

        ``block`` tells whether the call carried a sub-template slot; it
        defaults to ``sub_template is not None``. A block call whose
        sub-template is ``None`` renders those elements as empty text.

        Raises:
            ClassificationError: an argument is not JSON-like.
            RenderError: the sub-template failed; no partial output.
        """
        has_sub_template = (sub_template is not None) if block is None else bool(block)
        opts = self._options.resolve(options, has_sub_template=has_sub_template)
        acc = OutputAccumulator(distinct=opts.distinct)

        for index, raw in enumerate(arguments):
            arg = self._classifier.classify(raw)
            trace_io(self._log, "classified argument", index=index, kind=arg.kind.value, path=arg.path)
            for text in self._renderer.render(arg, opts, sub_template, root=root):
                kept = acc.offer(text)
                if not kept:
                    trace_io(self._log, "dropped duplicate", index=index, text=text)

        return acc.join(opts.separator)

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
        """Join *arguments* and write the result to *sink*; return the text.

        Raises:
            WriteError: the sink rejected the write.
        """
        text = self.concat(arguments, options, sub_template, block=block, root=root)
        try:
            sink.write(text)
        except (OSError, ValueError) as exc:
            self._log.error("cannot write concat output: %s", exc)
            raise WriteError(f"cannot write concat output: {exc}") from exc
        return text
