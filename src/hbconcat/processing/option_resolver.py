from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from hbconcat.constants import (
    DEFAULT_SEPARATOR,
    KNOWN_OPTIONS,
    OPT_DISTINCT,
    OPT_QUOTES,
    OPT_RENDER_ALL,
    OPT_SEPARATOR,
    OPT_SINGLE_QUOTE,
)
from hbconcat.core.interfaces.options import OptionResolverProtocol
from hbconcat.core.models import Options
from hbconcat.rendering.stringify import json_render


@dataclass
class OptionResolver(OptionResolverProtocol):
    """Resolve call-site hash options into an :class:`Options` record.

    Rules:
      - separator: rendered through *render_value* when present, else ",".
      - distinct, quotes, single_quote, render_all: enabled by presence,
        whatever the value (``distinct=False`` still enables distinct).
      - Unknown keys are ignored.
    """

    render_value: Callable[[Any], str] = json_render
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("hbconcat.options"))

    def resolve(
        self,
        hash_options: Optional[Mapping[str, Any]],
        *,
        has_sub_template: bool,
    ) -> Options:
        opts = hash_options or {}

        unknown = sorted(str(k) for k in opts if k not in KNOWN_OPTIONS)
        if unknown:
            self.logger.debug("ignoring unknown concat options: %s", ", ".join(unknown))

        if OPT_SEPARATOR in opts:
            separator = self.render_value(opts[OPT_SEPARATOR])
        else:
            separator = DEFAULT_SEPARATOR

        return Options(
            separator=separator,
            distinct=OPT_DISTINCT in opts,
            quotes=OPT_QUOTES in opts,
            single_quote=OPT_SINGLE_QUOTE in opts,
            render_all=OPT_RENDER_ALL in opts,
            has_sub_template=bool(has_sub_template),
        )
