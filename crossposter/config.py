"""
Static configuration for the crossposter converter.

All lookup tables are built once at import time and exposed read-only.
Keyword tables are tuples of pairs because their order decides which
entry wins when a title contains more than one keyword.
"""

from dataclasses import dataclass
from types import MappingProxyType


DEFAULT_BASE_URL = "https://claude-code-academy.com"
DEFAULT_OUTPUT_DIR = "dist/articles"

FORMAT_ALL = "all"
FORMAT_MARKDOWN = "markdown"
FORMAT_WECHAT = "wechat"
OUTPUT_FORMATS = (FORMAT_ALL, FORMAT_MARKDOWN, FORMAT_WECHAT)

SUPPORTED_EXTENSIONS = frozenset({".mdx", ".md"})


CALLOUT_EMOJI = MappingProxyType({
    "info": "💡",
    "warning": "⚠️",
    "error": "🚫",
    "danger": "🚫",
    "success": "✅",
    "default": "📌",
})

CALLOUT_TITLE = MappingProxyType({
    "info": "提示",
    "warning": "注意",
    "error": "警告",
    "danger": "警告",
    "success": "成功",
    "default": "备注",
})


SUMMARY_TEMPLATES = (
    ("为什么", "同样的需求，为什么别人一次搞定，你却要改5遍？90%的人不知道，"
              "一个配置文件就能让Claude Code的输出质量提升10倍。"),
    ("工作流", "还在让AI上来就写代码？难怪总是返工！掌握这套「研究→计划→实现」"
              "三阶段工作流，让Claude Code像资深工程师一样思考。"),
    ("质量", "代码写完一堆bug？类型全是any？这份质量红线清单，"
            "帮你堵住Claude Code偷懒的每一个漏洞。"),
    ("编码", "函数超过100行、命名乱七八糟、错误处理全靠猜...这些坏习惯，"
            "一份编码规范就能根治。"),
    ("安全", "SQL注入、硬编码密钥、不验证输入...这些安全漏洞你的AI助手可能正在写。"
            "这份安全清单必须收藏。"),
)

DEFAULT_SUMMARY = (
    "用好Claude Code的秘诀，不是提示词写得多花哨，而是这个99%的人都忽略的配置文件。"
    "5分钟配置，效率提升10倍。"
)


@dataclass(frozen=True)
class ThemeProfile:
    """Visual parameters for a generated cover image."""
    gradient: str
    icon: str
    badge: str
    badge_bg: str
    badge_color: str


COVER_THEMES = (
    ("为什么", ThemeProfile(
        gradient="linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
        icon="📋",
        badge="Claude Code 配置指南",
        badge_bg="rgba(102, 126, 234, 0.2)",
        badge_color="#a5b4fc",
    )),
    ("工作流", ThemeProfile(
        gradient="linear-gradient(135deg, #059669 0%, #34d399 100%)",
        icon="🔄",
        badge="效率提升",
        badge_bg="rgba(52, 211, 153, 0.2)",
        badge_color="#6ee7b7",
    )),
    ("质量", ThemeProfile(
        gradient="linear-gradient(135deg, #dc2626 0%, #f97316 100%)",
        icon="🛡️",
        badge="代码质量",
        badge_bg="rgba(239, 68, 68, 0.2)",
        badge_color="#fca5a5",
    )),
    ("编码", ThemeProfile(
        gradient="linear-gradient(135deg, #0ea5e9 0%, #22d3ee 100%)",
        icon="💻",
        badge="编码规范",
        badge_bg="rgba(14, 165, 233, 0.2)",
        badge_color="#7dd3fc",
    )),
    ("安全", ThemeProfile(
        gradient="linear-gradient(135deg, #f59e0b 0%, #fbbf24 100%)",
        icon="🔒",
        badge="安全最佳实践",
        badge_bg="rgba(245, 158, 11, 0.2)",
        badge_color="#fcd34d",
    )),
)

DEFAULT_THEME = ThemeProfile(
    gradient="linear-gradient(135deg, #8b5cf6 0%, #d946ef 100%)",
    icon="⚡",
    badge="Claude Code",
    badge_bg="rgba(139, 92, 246, 0.2)",
    badge_color="#c4b5fd",
)


@dataclass(frozen=True)
class PublisherConfig:
    """
    Per-run settings for a Publisher.

    Only the base URL affects the transformation itself; the rest shape
    where and how artifacts are written.
    """
    base_url: str = DEFAULT_BASE_URL
    output_dir: str = DEFAULT_OUTPUT_DIR
    default_subtitle: str = "Claude Code 配置指南"
    page_title: str = "微信公众号文章"

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        # Paths are appended with their leading slash intact
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
