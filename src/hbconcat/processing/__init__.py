"""Public API surface for hbconcat.processing."""
__all__ = [
    "option_resolver",
    "value_classifier",
]
