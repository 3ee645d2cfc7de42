"""Plain-text editing core for markdown comment editors."""

__all__ = [
    "actions",
    "adapters",
    "runtime",
    "text",
]

__version__ = "0.1.0"
