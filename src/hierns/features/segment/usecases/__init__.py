"""
Summary: Text and structured codecs for hierarchical path segments.
Why: Group the conversions that move segments across process boundaries.
"""

from . import structured_codec, text_codec
from .structured_codec import StructuredValue

__all__ = ["StructuredValue", "structured_codec", "text_codec"]
