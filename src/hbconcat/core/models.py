from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from hbconcat.constants import DEFAULT_SEPARATOR, QUOTES_DOUBLE, QUOTES_SINGLE

# Lookup path of a named argument, e.g. ("obj", "items") for ``obj.items``.
Path = Tuple[str, ...]


class ValueKind(Enum):
    """Closed set of argument variants."""
    EMPTY = "empty"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass(frozen=True)
class Options:
    """Normalized hash options, resolved once per call."""
    separator: str = DEFAULT_SEPARATOR
    distinct: bool = False
    quotes: bool = False
    single_quote: bool = False
    render_all: bool = False
    has_sub_template: bool = False

    @property
    def quotation_mark(self) -> str:
        if not self.quotes:
            return ""
        return QUOTES_SINGLE if self.single_quote else QUOTES_DOUBLE


@dataclass(frozen=True)
class Bound:
    """A call-site value that was looked up by name.

    Hosts wrap named arguments in ``Bound`` so the engine can hand the
    original lookup path back to the template engine when sub-rendering.
    """
    path: Path
    value: Any


@dataclass(frozen=True)
class Argument:
    kind: ValueKind
    value: Any
    path: Optional[Path] = None


@dataclass(frozen=True)
class RenderScope:
    """Binding under which a fragment is evaluated for one element.

    ``path`` set means "resolve relative to the original lookup path";
    ``path`` of ``None`` means "rebase onto ``value`` alone". ``root`` is
    the whole original input, when the host supplied one.
    """
    value: Any
    path: Optional[Path] = None
    root: Any = None

    @classmethod
    def for_argument(cls, arg: Argument, root: Any = None) -> "RenderScope":
        if arg.path is not None:
            return cls(value=arg.value, path=arg.path, root=root)
        return cls(value=arg.value, root=root)

    @classmethod
    def for_value(cls, value: Any, root: Any = None) -> "RenderScope":
        return cls(value=value, root=root)
