"""
Crossposter Core Engine

The orchestrator that loads an enriched-markdown article, runs it
through the portable-markdown and styled-HTML pipelines and writes one
artifact folder per article.

Each conversion owns its own working text and placeholder table, so
articles are independent of each other.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional

from .config import (
    FORMAT_ALL,
    FORMAT_MARKDOWN,
    FORMAT_WECHAT,
    OUTPUT_FORMATS,
    PublisherConfig,
)
from .converters.artifacts import generate_cover, generate_summary
from .converters.markdown_converter import MarkdownConverter
from .converters.wechat_converter import WechatConverter
from .document import ConversionError, Document


@dataclass(frozen=True)
class ConversionResult:
    """Every artifact produced for one article."""
    name: str
    title: str
    description: str
    markdown: str
    wechat_html: str
    summary: str
    cover_html: str


def convert_document(document: Document, config: Optional[PublisherConfig] = None) -> ConversionResult:
    """Run all pipelines for one document. Performs no I/O."""
    config = config or PublisherConfig()

    working, literals = MarkdownConverter.prepare(document, config.base_url)
    markdown = literals.restore_markdown(working)
    wechat_html = WechatConverter.convert(working, literals, page_title=config.page_title)

    title = document.title
    description = document.description
    return ConversionResult(
        name=document.source_name,
        title=title,
        description=description,
        markdown=markdown,
        wechat_html=wechat_html,
        summary=generate_summary(title),
        cover_html=generate_cover(title, description, config.default_subtitle),
    )


class Publisher:
    """
    Main crossposter engine.

    Accepts article files or directories of articles and writes the
    Zhihu/Juejin markdown, WeChat HTML, summary and cover artifacts.
    """

    ARTIFACTS = {
        FORMAT_MARKDOWN: ("zhihu.md", "juejin.md"),
        FORMAT_WECHAT: ("wechat.html", "summary.txt", "cover.html"),
    }

    def __init__(self, config: Optional[PublisherConfig] = None):
        self.config = config or PublisherConfig()

    @property
    def output_dir(self) -> str:
        return self.config.output_dir

    def convert(self, source: str, output_format: str = FORMAT_ALL, save: bool = True) -> list[ConversionResult]:
        """
        Convert a source to its artifacts.

        Args:
            source: Article path or directory of articles
            output_format: "all", "markdown" or "wechat"
            save: If True, write the artifacts under the output directory

        Returns:
            One ConversionResult per converted article

        Raises:
            FileNotFoundError: If the source does not exist.
            ValueError: If output_format is unknown.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {output_format}\n"
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
            )

        source = source.strip()

        if os.path.isdir(source):
            print(f"[DIR] Converting all articles in: {source}")
            return self.convert_directory(source, output_format=output_format, save=save)

        if not os.path.exists(source):
            raise FileNotFoundError(f"Source document not found: {source}")
        if not os.path.isfile(source):
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide an article file or a directory."
            )

        return [self._convert_file(source, output_format, save)]

    def convert_directory(self, dir_path: str, output_format: str = FORMAT_ALL,
                          save: bool = True) -> list[ConversionResult]:
        """Convert every supported article in a directory."""
        results = []

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path) or not MarkdownConverter.can_handle(file_path):
                continue

            try:
                results.append(self._convert_file(file_path, output_format, save))
            except (OSError, ConversionError) as e:
                print(f"[ERROR] Failed to convert {filename}: {e}", file=sys.stderr)

        return results

    def _convert_file(self, file_path: str, output_format: str, save: bool) -> ConversionResult:
        print(f"[MDX] Converting: {file_path}")
        document = Document.from_file(file_path)
        result = convert_document(document, self.config)

        if save:
            self.write_artifacts(result, output_format)

        return result

    def write_artifacts(self, result: ConversionResult, output_format: str = FORMAT_ALL) -> list[str]:
        """Write the artifacts of one article; returns the written paths."""
        article_dir = os.path.join(self.output_dir, result.name)
        os.makedirs(article_dir, exist_ok=True)

        contents = {
            "zhihu.md": result.markdown,
            "juejin.md": result.markdown,
            "wechat.html": result.wechat_html,
            "summary.txt": result.summary,
            "cover.html": result.cover_html,
        }

        written = []
        for fmt, names in self.ARTIFACTS.items():
            if output_format not in (FORMAT_ALL, fmt):
                continue
            for name in names:
                out_path = os.path.join(article_dir, name)
                with open(out_path, "w", encoding="utf-8") as f:
                    f.write(contents[name])
                print(f"[SAVED] {out_path}")
                written.append(out_path)

        return written

    @staticmethod
    def supported_formats() -> dict:
        """Return the supported input extensions and output formats."""
        return {
            "Input": sorted(MarkdownConverter.SUPPORTED_EXTENSIONS),
            "Output formats": list(OUTPUT_FORMATS),
            "Markdown artifacts": list(Publisher.ARTIFACTS[FORMAT_MARKDOWN]),
            "WeChat artifacts": list(Publisher.ARTIFACTS[FORMAT_WECHAT]),
        }
