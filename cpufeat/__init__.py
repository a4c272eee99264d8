"""AArch64 feature, cache and capability descriptions with text and JSON reports."""

__version__ = "0.1.0"

__all__ = ["aarch64", "cache_info", "introspection", "listing"]