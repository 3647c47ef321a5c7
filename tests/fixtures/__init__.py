# Test fixtures
from .sample_articles import (
    ARCHITECTURE_TABLE,
    CALLOUT_WARNING,
    CALLOUT_WITH_CODE,
    CAPTIONED_IMAGE,
    COMPARISON_GRID,
    HIERARCHY_DIAGRAM,
    PLAIN_ARTICLE_MD,
    SAMPLE_ARTICLE_MDX,
    STEPS_BLOCK,
    WORKFLOW_DIAGRAM,
    WORKFLOW_DIAGRAM_REWORDED,
)

__all__ = [
    "ARCHITECTURE_TABLE",
    "CALLOUT_WARNING",
    "CALLOUT_WITH_CODE",
    "CAPTIONED_IMAGE",
    "COMPARISON_GRID",
    "HIERARCHY_DIAGRAM",
    "PLAIN_ARTICLE_MD",
    "SAMPLE_ARTICLE_MDX",
    "STEPS_BLOCK",
    "WORKFLOW_DIAGRAM",
    "WORKFLOW_DIAGRAM_REWORDED",
]
