"""Vendor-neutral message bus, cluster discovery and function invocation helpers."""

__version__ = "0.1.0"
__all__ = ["cluster", "container", "mbus"]