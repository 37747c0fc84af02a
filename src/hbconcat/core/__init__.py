from __future__ import annotations

"""Public surface for hbconcat.core.

Exposes the data model and protocol types from a stable import location:

    from hbconcat.core import Options, RenderScope, TemplateEngineProtocol
"""

from hbconcat.core.models import Argument, Bound, Options, RenderScope, ValueKind
from hbconcat.core.interfaces import (
    ConcatEngineProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    OptionResolverProtocol,
    TemplateEngineProtocol,
    ValueClassifierProtocol,
)

__all__ = [
    # Model
    "Argument",
    "Bound",
    "Options",
    "RenderScope",
    "ValueKind",
    # Protocols
    "ConcatEngineProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "OptionResolverProtocol",
    "TemplateEngineProtocol",
    "ValueClassifierProtocol",
]
