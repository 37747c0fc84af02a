"""Exception hierarchy for hbconcat.

Every failure raised by the engine derives from :class:`EngineError` so
hosts can catch the whole family with a single ``except`` clause.
"""


class EngineError(Exception):
    """Base class for all concatenation failures."""


class ClassificationError(EngineError, TypeError):
    """An argument is neither empty, scalar, sequence nor mapping."""

    def __init__(self, value: object) -> None:
        super().__init__(f"cannot classify value of type {type(value).__name__}: {value!r}")
        self.value = value


class RenderError(EngineError):
    """The sub-render collaborator failed while evaluating a fragment."""


class WriteError(EngineError):
    """Writing the joined output to its sink failed."""
