"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from crossposter.config import PublisherConfig
from crossposter.core import Publisher
from crossposter.document import Document
from tests.fixtures import PLAIN_ARTICLE_MD, SAMPLE_ARTICLE_MDX


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    return "https://claude-code-academy.com"


@pytest.fixture
def sample_document():
    """The full sample article as a Document."""
    return Document.from_text(SAMPLE_ARTICLE_MDX, source_name="why-claude-md-matters")


@pytest.fixture
def article_file(tmp_path):
    """Write the sample article to a temporary .mdx file."""
    path = tmp_path / "src" / "why-claude-md-matters.mdx"
    path.parent.mkdir()
    path.write_text(SAMPLE_ARTICLE_MDX, encoding="utf-8")
    return path


@pytest.fixture
def article_dir(tmp_path):
    """A directory holding two articles and one unrelated file."""
    directory = tmp_path / "articles"
    directory.mkdir()
    (directory / "why-claude-md-matters.mdx").write_text(SAMPLE_ARTICLE_MDX, encoding="utf-8")
    (directory / "coding-standards.md").write_text(PLAIN_ARTICLE_MD, encoding="utf-8")
    (directory / "notes.txt").write_text("not an article", encoding="utf-8")
    return directory


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "dist"


@pytest.fixture
def publisher(output_dir):
    """A publisher writing into a temporary directory."""
    return Publisher(PublisherConfig(output_dir=str(output_dir)))
