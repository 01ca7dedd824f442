"""SQL action target."""

from .database import SQLDatabase, format_rows

__all__ = ["SQLDatabase", "format_rows"]
