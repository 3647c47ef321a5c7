"""
Enriched-Markdown to Portable-Markdown Converter

Strips the authoring dialect (preamble, imports, comments), rewrites
presentational blocks into plain markdown, makes root-relative image
paths absolute and canonicalizes whitespace. Code blocks are protected
for the whole run so none of those passes can touch them.
"""

import os
import re

from ..config import DEFAULT_BASE_URL, SUPPORTED_EXTENSIONS
from ..document import Document, PREAMBLE_PATTERN
from ..literals import LiteralTable
from .blocks import rewrite_blocks


IMPORT_PATTERN = re.compile(r"^import\s+.*$", re.MULTILINE)
COMMENT_PATTERN = re.compile(r"\{/\*.*?\*/\}", re.DOTALL)

MD_IMAGE_PATH = re.compile(r"!\[([^\]]*)\]\(/(?!/)([^)]+)\)")
IMG_TAG_PATH = re.compile(r"(<img\b[^>]*?\bsrc=)([\"'])/(?!/)([^\"']+)\2")


class MarkdownConverter:
    """Converts enriched markdown (MDX) into portable markdown."""

    SUPPORTED_EXTENSIONS = SUPPORTED_EXTENSIONS

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in MarkdownConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def prepare(document: Document, base_url: str = DEFAULT_BASE_URL) -> tuple[str, LiteralTable]:
        """
        Run the portable-markdown pipeline but leave code placeholders in.

        Returns the working text and the table that restores it. Fences
        introduced by the block rewriter are protected as well, so the
        returned text contains no raw fences at all.
        """
        literals = LiteralTable()
        text = literals.protect(document.body)
        text = strip_dialect(text)
        text = rewrite_blocks(text, base_url)
        text = literals.protect(text)
        text = normalize_paths(text, base_url)
        text = canonicalize_whitespace(text)
        return text, literals

    @staticmethod
    def convert(document: Document, base_url: str = DEFAULT_BASE_URL) -> str:
        """Convert a document to portable markdown."""
        text, literals = MarkdownConverter.prepare(document, base_url)
        return literals.restore_markdown(text)


def strip_dialect(text: str) -> str:
    """Delete the preamble, import lines and ``{/* */}`` comments."""
    text = PREAMBLE_PATTERN.sub("", text, count=1)
    text = IMPORT_PATTERN.sub("", text)
    return COMMENT_PATTERN.sub("", text)


def normalize_paths(text: str, base_url: str) -> str:
    """Make root-relative image references absolute against ``base_url``."""
    base_url = base_url.rstrip("/")
    text = MD_IMAGE_PATH.sub(lambda m: f"![{m.group(1)}]({base_url}/{m.group(2)})", text)
    return IMG_TAG_PATH.sub(lambda m: f"{m.group(1)}{m.group(2)}{base_url}/{m.group(3)}{m.group(2)}", text)


def canonicalize_whitespace(text: str) -> str:
    """
    Normalize blank lines.

    Whitespace-only lines are emptied, runs of blank lines collapse to
    one, leading blank lines go and the text ends with exactly one
    newline. Idempotent.
    """
    text = re.sub(r"^[ \t]+$", "", text, flags=re.MULTILINE)
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = text.lstrip("\n")
    return text.rstrip("\n") + "\n"
