"""Core functionality for the sdfgen package."""

from .blend import blend_pair, blend_fields

__all__ = ["blend_pair", "blend_fields"]
