"""
Derived artifacts: promotional summary and cover page.

Both are pure functions of the document title (and description); they
never look at the rendered article.
"""

from typing import Optional

from ..config import (
    COVER_THEMES,
    DEFAULT_SUMMARY,
    DEFAULT_THEME,
    SUMMARY_TEMPLATES,
    ThemeProfile,
)
from ..render import render_template


def generate_summary(title: str) -> str:
    """Pick the summary of the first keyword contained in ``title``."""
    for keyword, summary in SUMMARY_TEMPLATES:
        if keyword in title:
            return summary
    return DEFAULT_SUMMARY


def select_theme(title: str) -> ThemeProfile:
    for keyword, theme in COVER_THEMES:
        if keyword in title:
            return theme
    return DEFAULT_THEME


def generate_cover(title: str, description: str = "", default_subtitle: Optional[str] = None) -> str:
    """
    Render the 2.35:1 cover page for an article.

    Args:
        title: Article title, also used to pick the theme
        description: Subtitle text
        default_subtitle: Used when ``description`` is empty

    Returns:
        A standalone HTML document
    """
    subtitle = description or default_subtitle or ""
    return render_template(
        "cover.html.j2",
        title=title,
        subtitle=subtitle,
        theme=select_theme(title),
    )
