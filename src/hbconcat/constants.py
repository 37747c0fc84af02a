from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Quotation marks applied around every produced element when `quotes` is set.
QUOTES_DOUBLE: str = '"'
QUOTES_SINGLE: str = "'"

DEFAULT_SEPARATOR: str = ","

# Recognised hash option names.
OPT_SEPARATOR: str = "separator"
OPT_DISTINCT: str = "distinct"
OPT_QUOTES: str = "quotes"
OPT_SINGLE_QUOTE: str = "single_quote"
OPT_RENDER_ALL: str = "render_all"

KNOWN_OPTIONS = frozenset(
    {OPT_SEPARATOR, OPT_DISTINCT, OPT_QUOTES, OPT_SINGLE_QUOTE, OPT_RENDER_ALL}
)

# Root of every logger handed out by the package.
LOGGER_NAMESPACE: str = "hbconcat"

# Environment flags.
ENV_TRACE_IO: str = "HBCONCAT_TRACE_IO"
ENV_LOG_JSON: str = "HBCONCAT_LOG_JSON"
ENV_LOG_LEVEL: str = "HBCONCAT_LOG_LEVEL"
ENV_VERSION: str = "HBCONCAT_VERSION"
