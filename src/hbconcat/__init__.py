from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from hbconcat.constants import DEFAULT_SEPARATOR, QUOTES_DOUBLE, QUOTES_SINGLE
from hbconcat.core.models import Argument, Bound, Options, RenderScope, ValueKind
from hbconcat.core.interfaces.templating import TemplateEngineProtocol
from hbconcat.errors import ClassificationError, EngineError, RenderError, WriteError
from hbconcat.logging.helpers import get_logger
from hbconcat.processing.option_resolver import OptionResolver
from hbconcat.processing.value_classifier import DefaultValueClassifier
from hbconcat.rendering.accumulator import OutputAccumulator
from hbconcat.rendering.element_renderer import ElementRenderer
from hbconcat.rendering.execution import ConcatEngine
from hbconcat.rendering.stringify import json_render
from hbconcat.rendering.template_engine import PybarsTemplateEngine
from hbconcat.runtime.container import EngineBuilder, EngineConfig

__version__ = '0.2.0'

_default_engine: Optional[ConcatEngine] = None


def engine_factory(
    *,
    template_engine: Optional[TemplateEngineProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> ConcatEngine:
    """Factory helper that returns a concrete ConcatEngine.

    Falls back to PybarsTemplateEngine when no template engine is provided.
    """
    lg = logger or get_logger('engine')
    engine = template_engine or PybarsTemplateEngine(logger=lg.getChild('templates'))
    return ConcatEngine(template_engine=engine, logger=lg)


def default_engine() -> ConcatEngine:
    """Return the lazily built, process-wide engine used by `concat`."""
    global _default_engine
    if _default_engine is None:
        _default_engine = EngineBuilder.from_env().build()
    return _default_engine


def concat(
    arguments: Iterable[Any],
    options: Optional[Mapping[str, Any]] = None,
    sub_template: Any = None,
    *,
    block: Optional[bool] = None,
    root: Any = None,
) -> str:
    """Shortcut for ``default_engine().concat(...)``."""
    return default_engine().concat(arguments, options, sub_template, block=block, root=root)


def compile_template(source: str) -> Any:
    """Compile a sub-template with the default engine's template engine."""
    return default_engine().compile(source)


__all__ = [
    'Argument',
    'Bound',
    'ClassificationError',
    'ConcatEngine',
    'DEFAULT_SEPARATOR',
    'DefaultValueClassifier',
    'ElementRenderer',
    'EngineBuilder',
    'EngineConfig',
    'EngineError',
    'OptionResolver',
    'Options',
    'OutputAccumulator',
    'PybarsTemplateEngine',
    'QUOTES_DOUBLE',
    'QUOTES_SINGLE',
    'RenderError',
    'RenderScope',
    'TemplateEngineProtocol',
    'ValueKind',
    'WriteError',
    'compile_template',
    'concat',
    'default_engine',
    'engine_factory',
    'json_render',
]
