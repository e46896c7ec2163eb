"""Function invocation helpers: URI parsing and error documents."""

__all__ = ["invocation"]