"""AIP resource name scanning, matching, formatting, validation, and field violation collection."""

__version__ = "0.1.0"
__all__ = ["scanner", "validate", "resourcename", "validation"]