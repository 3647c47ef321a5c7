"""
Portable-Markdown to Styled-HTML Converter

Renders the cleaned markdown into HTML where every element carries its
own inline style, for editors that accept no stylesheet (WeChat
official-account articles). This is a line-oriented regex renderer, not
a markdown parser, so the order of the passes matters:

- tables are built before paragraph wrapping, otherwise their rows
  would be wrapped as text;
- images and links are rendered after paragraph wrapping, otherwise the
  generated tags would stop their lines from being wrapped;
- code placeholders are restored last so nothing renders inside them.
"""

import html
import re
from types import MappingProxyType

from ..literals import SENTINEL, LiteralRegion, LiteralTable
from ..render import render_template


STYLES = MappingProxyType({
    "h1": "font-size: 24px; font-weight: bold; color: #1f1f1f; margin: 30px 0 20px; text-align: center;",
    "h2": ("font-size: 20px; font-weight: bold; color: #2f2f2f; margin: 25px 0 15px; "
           "border-bottom: 1px solid #eee; padding-bottom: 8px;"),
    "h3": "font-size: 18px; font-weight: bold; color: #3f3f3f; margin: 20px 0 10px;",
    "strong": "color: #333;",
    "code": ("background: #f5f5f5; padding: 2px 6px; border-radius: 3px; "
             "font-family: Consolas, monospace; font-size: 14px; color: #e83e8c;"),
    "blockquote": "border-left: 4px solid #4caf50; padding: 10px 15px; margin: 15px 0; background: #f9f9f9; color: #666;",
    "li": "margin: 5px 0;",
    "ul": "padding-left: 20px; margin: 10px 0;",
    "table": "width: 100%; border-collapse: collapse; margin: 15px 0; font-size: 14px;",
    "th": "background: #f5f5f5; padding: 10px; border: 1px solid #ddd; text-align: left; font-weight: bold;",
    "td": "padding: 10px; border: 1px solid #ddd;",
    "p": "margin: 10px 0; line-height: 1.8; color: #333;",
    "img": "max-width: 100%; display: block; margin: 15px auto;",
    "a": "color: #576b95; text-decoration: none;",
    "hr": "border: none; border-top: 1px solid #eee; margin: 20px 0;",
    "pre": ("background: #f8f8f8; padding: 15px; border-radius: 5px; overflow-x: auto; "
            "font-size: 13px; line-height: 1.5; white-space: pre; "
            "font-family: 'Courier New', Consolas, monospace;"),
})

TABLE_PATTERN = re.compile(r"^\|(.+)\|[ \t]*\n\|[-:| \t]+\|[ \t]*\n((?:\|.*\|[ \t]*(?:\n|$))+)", re.MULTILINE)
RULE_PATTERN = re.compile(r"^---$", re.MULTILINE)

# Lines that paragraph wrapping must leave alone
_BLOCK_START = re.compile(r"^(?:<(?:h[1-6]|ul|li|blockquote|table|pre|p|hr)\b|</|---$|" + SENTINEL + ")")


class WechatConverter:
    """Converts portable markdown into a self-contained styled HTML page."""

    @staticmethod
    def convert(markdown: str, literals: LiteralTable, page_title: str = "微信公众号文章") -> str:
        """
        Render markdown (with code placeholders still in place) to HTML.

        Args:
            markdown: Output of MarkdownConverter.prepare()
            literals: The table returned alongside it
            page_title: <title> of the generated page

        Returns:
            A complete HTML document
        """
        body = render_body(markdown)
        body = literals.restore(body, render_literal)
        return render_template("wechat.html.j2", title=page_title, content=body)


def render_body(markdown: str) -> str:
    text = markdown

    text = _render_headings(text)
    text = _render_emphasis(text)
    text = re.sub(r"`([^`\n]+)`", lambda m: f'<code style="{STYLES["code"]}">{m.group(1)}</code>', text)
    text = _render_blockquotes(text)
    text = _render_lists(text)
    text = TABLE_PATTERN.sub(lambda m: render_table(m.group(1), m.group(2)), text)
    text = _wrap_paragraphs(text)
    text = _render_images_and_links(text)
    text = RULE_PATTERN.sub(f'<hr style="{STYLES["hr"]}">', text)

    return text


def _render_headings(text: str) -> str:
    for level in (3, 2, 1):
        pattern = re.compile(r"^" + "#" * level + r" (.*)$", re.MULTILINE)
        tag = f"h{level}"
        text = pattern.sub(lambda m: f'<{tag} style="{STYLES[tag]}">{m.group(1)}</{tag}>', text)
    return text


def _render_emphasis(text: str) -> str:
    text = re.sub(r"\*\*([^*\n]+)\*\*", lambda m: f'<strong style="{STYLES["strong"]}">{m.group(1)}</strong>', text)
    return re.sub(r"\*([^*\n]+)\*", r"<em>\1</em>", text)


def _render_blockquotes(text: str) -> str:
    text = re.sub(
        r"^>[ \t]?(.*)$",
        lambda m: f'<blockquote style="{STYLES["blockquote"]}">{m.group(1)}</blockquote>',
        text,
        flags=re.MULTILINE,
    )
    # Consecutive quote lines become one quote
    return re.sub(r"</blockquote>\n<blockquote[^>]*>", "<br>", text)


def _render_lists(text: str) -> str:
    text = re.sub(
        r"^- (.*)$",
        lambda m: f'<li style="{STYLES["li"]}">{m.group(1)}</li>',
        text,
        flags=re.MULTILINE,
    )
    return re.sub(
        r"(?:^<li[^>]*>.*</li>(?:\n|$))+",
        _wrap_list,
        text,
        flags=re.MULTILINE,
    )


def _wrap_list(match: re.Match) -> str:
    items = match.group(0).rstrip("\n")
    return f'<ul style="{STYLES["ul"]}">{items}</ul>\n'


def _split_row(row: str) -> list[str]:
    row = row.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def render_table(header_row: str, body_rows: str) -> str:
    """Render one markdown table; body rows are fitted to the header width."""
    headers = _split_row(header_row)
    rows = []
    for line in body_rows.strip().split("\n"):
        cells = _split_row(line)
        rows.append((cells + [""] * len(headers))[:len(headers)])

    table = f'<table style="{STYLES["table"]}">'
    table += "<thead><tr>"
    for header in headers:
        table += f'<th style="{STYLES["th"]}">{header}</th>'
    table += "</tr></thead>"

    table += "<tbody>"
    for row in rows:
        table += "<tr>"
        for cell in row:
            table += f'<td style="{STYLES["td"]}">{cell}</td>'
        table += "</tr>"
    table += "</tbody></table>\n"

    return table


def _wrap_paragraphs(text: str) -> str:
    lines = []
    for line in text.split("\n"):
        if line.strip() and not _BLOCK_START.match(line):
            line = f'<p style="{STYLES["p"]}">{line}</p>'
        lines.append(line)
    return "\n".join(lines)


def _render_images_and_links(text: str) -> str:
    text = re.sub(
        r"!\[([^\]]*)\]\(([^)]+)\)",
        lambda m: f'<img src="{m.group(2)}" alt="{m.group(1)}" style="{STYLES["img"]}">',
        text,
    )
    return re.sub(
        r"\[([^\]]+)\]\(([^)]+)\)",
        lambda m: f'<a href="{m.group(2)}" style="{STYLES["a"]}">{m.group(1)}</a>',
        text,
    )


def render_literal(region: LiteralRegion) -> str:
    """Render a code block as an escaped, shaded <pre>."""
    return f'<pre style="{STYLES["pre"]}"><code>{html.escape(region.content, quote=True)}</code></pre>'
