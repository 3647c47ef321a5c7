"""
Source document and metadata extraction.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .literals import strip_fences


PREAMBLE_PATTERN = re.compile(r"\A---\n(.*?)\n---\n", re.DOTALL)
HEADING_PATTERN = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)


class ConversionError(Exception):
    """Raised when a source document cannot be read as text."""
    pass


def parse_preamble(text: str) -> dict[str, str]:
    """
    Read the leading ``---`` delimited key/value block.

    Only flat ``key: value`` lines are understood; anything else inside
    the block is ignored. Returns an empty dict when there is no block.
    """
    match = PREAMBLE_PATTERN.match(text)
    if not match:
        return {}

    fields = {}
    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        if not sep or not key.strip() or key.startswith((" ", "\t")):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        fields[key.strip()] = value
    return fields


@dataclass(frozen=True)
class Document:
    """
    An authored enriched-markdown document.

    The body is normalized to ``\\n`` line endings on load and is never
    modified afterwards.
    """
    body: str
    source_name: str = "untitled"

    @classmethod
    def from_text(cls, text: str, source_name: str = "untitled") -> "Document":
        return cls(body=text.replace("\r\n", "\n").replace("\r", "\n"),
                   source_name=source_name)

    @classmethod
    def from_file(cls, file_path: Path | str) -> "Document":
        """
        Load a document from disk.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConversionError: If the file is not UTF-8 text.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Source document not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConversionError(f"Source document is not valid UTF-8: {path}") from e
        return cls.from_text(text, source_name=path.stem)

    @property
    def preamble(self) -> dict[str, str]:
        return parse_preamble(self.body)

    @property
    def title(self) -> str:
        """Preamble title, else the first top-level heading, else the source name."""
        title = self.preamble.get("title")
        if title:
            return title
        heading = self._first_heading()
        return heading or self.source_name

    @property
    def description(self) -> str:
        return self.preamble.get("description", "")

    def _first_heading(self) -> Optional[str]:
        # Headings inside fenced code are comments, not titles
        body = PREAMBLE_PATTERN.sub("", self.body, count=1)
        match = HEADING_PATTERN.search(strip_fences(body))
        return match.group(1).strip() if match else None
