"""
Literal-region protection.

Fenced code blocks are swapped for opaque placeholder tokens before any
text rewriting happens, and swapped back at the very end of each output
pipeline. The table is an ordered association list keyed by a
monotonically increasing id, so a token can never be produced by
formatting author text.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional


# Fences own whole lines. The opening line may sit behind an indent, a
# quote or a list marker, and may carry metadata after the language
# (```js filename="x"); the closing run must repeat the opening backticks.
_LINE_PREFIX = r"([ \t>]*)((?:[-*+]|\d+[.)])[ \t]+)?"

FENCE_PATTERN = re.compile(
    r"^" + _LINE_PREFIX + r"(`{3,})([\w+#.-]*)[^`\n]*\n(.*?)^[ \t>]*\3[ \t]*$",
    re.MULTILINE | re.DOTALL,
)

SENTINEL = "\ue000"
PLACEHOLDER_PATTERN = re.compile(SENTINEL + r"LITERAL:(\d+)" + SENTINEL)

_PREFIXED_PLACEHOLDER = re.compile(
    r"^" + _LINE_PREFIX + SENTINEL + r"LITERAL:(\d+)" + SENTINEL, re.MULTILINE
)


@dataclass(frozen=True)
class LiteralRegion:
    """An extracted fenced block."""
    language: Optional[str]
    content: str

    def as_fence(self) -> str:
        return f"```{self.language or ''}\n{self.content}\n```"


def placeholder(literal_id: int) -> str:
    """Return the token that stands in for literal ``literal_id``."""
    return f"{SENTINEL}LITERAL:{literal_id}{SENTINEL}"


def _outdent(content: str, indent: str) -> str:
    """Drop the container prefix a nested fence repeats on its body lines."""
    if not indent:
        return content
    bare = indent.rstrip()
    lines = []
    for line in content.split("\n"):
        if line.startswith(indent):
            line = line[len(indent):]
        elif line.rstrip() == bare:
            line = ""
        lines.append(line)
    return "\n".join(lines)


def strip_fences(text: str) -> str:
    """Remove every fenced region from ``text``."""
    return FENCE_PATTERN.sub("", text)


class LiteralTable:
    """
    Ordered placeholder-id -> LiteralRegion mapping for one conversion.

    A table belongs to exactly one document conversion and is never
    shared; protect() may be called more than once and keeps numbering.
    """

    def __init__(self):
        self._entries: list[tuple[int, LiteralRegion]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def get(self, literal_id: int) -> LiteralRegion:
        for entry_id, region in self._entries:
            if entry_id == literal_id:
                return region
        raise KeyError(literal_id)

    def protect(self, text: str) -> str:
        """Replace every fenced region in ``text`` with a fresh placeholder."""
        def _swap(match: re.Match) -> str:
            literal_id = len(self._entries)
            indent = match.group(1) + " " * len(match.group(2) or "")
            region = LiteralRegion(
                language=match.group(4) or None,
                content=_outdent(match.group(5), indent).strip(),
            )
            self._entries.append((literal_id, region))
            return match.group(1) + (match.group(2) or "") + placeholder(literal_id)

        return FENCE_PATTERN.sub(_swap, text)

    def restore_markdown(self, text: str) -> str:
        """
        Put every region back as a fenced block.

        A quote or indent prefix in front of a placeholder is repeated on
        each restored line so the block stays inside its container; after
        a list marker the block continues at the item's indent. Any other
        placeholder is replaced by the bare fence.
        """
        def _swap(match: re.Match) -> str:
            prefix, marker = match.group(1), match.group(2) or ""
            lines = self.get(int(match.group(3))).as_fence().split("\n")
            continuation = prefix + " " * len(marker)
            restored = [prefix + marker + lines[0]]
            restored += [continuation + line if line else continuation.rstrip()
                         for line in lines[1:]]
            return "\n".join(restored)

        text = _PREFIXED_PLACEHOLDER.sub(_swap, text)
        return PLACEHOLDER_PATTERN.sub(
            lambda match: self.get(int(match.group(1))).as_fence(), text
        )

    def restore(self, text: str, render: Callable[[LiteralRegion], str]) -> str:
        """Replace every placeholder with ``render(region)``."""
        return PLACEHOLDER_PATTERN.sub(
            lambda match: render(self.get(int(match.group(1)))), text
        )
