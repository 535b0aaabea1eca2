"""Terminal text editor built around a tab-aware line buffer."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "view",
]

__version__ = "0.1.0"
