"""
.. include:: ../README.md
"""

__all__ = [
    "config",
    "exceptions",
    "loader",
    "records",
    "store",
    "tracing",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
