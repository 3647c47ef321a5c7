"""
Crossposter - MDX Multi-Platform Publisher

Converts a single enriched-markdown (MDX) article into portable
markdown for Zhihu/Juejin, inline-styled HTML for WeChat official
accounts, a promotional summary and a cover image page.
"""

from .config import PublisherConfig, ThemeProfile
from .core import ConversionResult, Publisher, convert_document
from .document import ConversionError, Document

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "ConversionResult",
    "Document",
    "Publisher",
    "PublisherConfig",
    "ThemeProfile",
    "convert_document",
]
