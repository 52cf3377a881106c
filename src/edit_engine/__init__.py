"""UI-agnostic gap-buffer text editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "modes",
    "runtime",
    "session",
    "syntax",
    "view",
]

__version__ = "0.1.0"
