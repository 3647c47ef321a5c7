"""
Presentational-block recognizers.

Each recognizer matches one hand-authored layout construct by the shape
of its markup and replaces the whole region with a portable equivalent.
The catalogue is closed and evaluated in a fixed order, most specific
signature first, so the generic wrapper pass only ever sees what the
curated recognizers left behind. A curated recognizer whose signature is
absent simply does not fire and its region degrades to generic handling.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..config import CALLOUT_EMOJI, CALLOUT_TITLE


class BlockKind(Enum):
    """Kinds of presentational blocks, in recognition priority order."""
    CALLOUT = "callout"
    STEP_SEQUENCE = "step_sequence"
    COMPARISON_GRID = "comparison_grid"
    WORKFLOW_DIAGRAM = "workflow_diagram"
    ARCHITECTURE_TABLE = "architecture_table"
    HIERARCHY_DIAGRAM = "hierarchy_diagram"
    GENERIC_WRAPPER = "generic_wrapper"


@dataclass(frozen=True)
class Recognizer:
    kind: BlockKind
    pattern: re.Pattern
    rewrite: Callable[[re.Match, str], str]
    repeat: bool = False

    def apply(self, text: str, base_url: str) -> str:
        """Rewrite every match; a repeating recognizer runs until the text settles."""
        while True:
            rewritten = self.pattern.sub(lambda match: self.rewrite(match, base_url), text)
            if not self.repeat or rewritten == text:
                return rewritten
            text = rewritten


# ──────────────────────────────────────────────────────────────
# Curated substitutes
# ──────────────────────────────────────────────────────────────

COMPARISON_TABLE = """
| 没有 CLAUDE.md | 有 CLAUDE.md |
|:--------------|:-------------|
| 用户: "写一个登录函数" | 用户: "写一个登录函数" |
| ↓ Claude: 直接开始写代码 | ↓ Claude: 先研究现有代码 |
| ↓ 输出: camelCase 命名、无错误处理 | ↓ Claude: 制定实现计划 |
| ↓ 用户: "改成 snake_case" | ↓ Claude: 获得确认后编码 |
| ↓ 用户: "加上错误处理" | ↓ 输出: 符合规范、完整错误处理 |
| ↓ 用户: "不要用 any" | |
| **反复修改 3-5 次** | **一次到位** |
"""

WORKFLOW_DIAGRAM = """
**三阶段工作流程**

```
┌─────────────────┐    ┌─────────────────┐    ┌─────────────────┐
│  1. 研究阶段    │ →  │  2. 计划阶段    │ →  │  3. 实现阶段    │
│  (RESEARCH)     │    │  (PLAN)         │    │  (IMPLEMENT)    │
├─────────────────┤    ├─────────────────┤    ├─────────────────┤
│ • 检查现有代码  │    │ • 列出文件清单  │    │ • 遵循代码风格  │
│ • Glob/Grep搜索 │    │ • 说明方案      │    │ • 完整错误处理  │
│ • 理解架构      │    │ • 识别风险      │    │ • 同步写测试    │
└─────────────────┘    └─────────────────┘    └─────────────────┘
                              ↓
                    ⚠️ 等待用户确认再编码
```
"""

ARCHITECTURE_TABLE = """
**CLAUDE.md 模块架构（按重要性排序）**

| 优先级 | 模块 | 说明 |
|:------|:-----|:-----|
| 🔴 高 | 核心工作流程 | 研究→计划→实现 |
| 🔴 高 | 质量红线 | 禁止清单+检查清单 |
| 🔴 高 | 编码标准 | 命名+函数规范 |
| 🔴 高 | 安全标准 | 输入验证+数据安全 |
| 🟡 中 | 技术栈适配 | 框架+依赖管理 |
| 🟡 中 | 测试规范 | 覆盖率+文件组织 |
| 🟡 中 | Git 规范 | 分支+提交格式 |
| 🔵 低 | 沟通风格 | 语言偏好+交互方式 |
"""

HIERARCHY_DIAGRAM = """
**配置文件优先级**

```
┌────────────────────────────────────────────┐
│  项目级配置（优先级最高）                  │
│  位置：项目根目录/CLAUDE.md                │
│  作用：当前项目特定规范                    │
└────────────────────────────────────────────┘
                     ↓ 覆盖
┌────────────────────────────────────────────┐
│  全局配置（优先级较低）                    │
│  位置：~/.claude/CLAUDE.md                 │
│  作用：所有项目通用偏好                    │
└────────────────────────────────────────────┘
```
"""


# ──────────────────────────────────────────────────────────────
# Rewrite functions
# ──────────────────────────────────────────────────────────────

def _fixed(replacement: str) -> Callable[[re.Match, str], str]:
    return lambda match, base_url: replacement


def _rewrite_callout(match: re.Match, base_url: str) -> str:
    callout_type = match.group(1)
    emoji = CALLOUT_EMOJI.get(callout_type, CALLOUT_EMOJI["default"])
    title = CALLOUT_TITLE.get(callout_type, CALLOUT_TITLE["default"])

    quoted = "\n".join(f"> {line}".rstrip() for line in match.group(2).strip().split("\n"))
    return f"> {emoji} **{title}**\n>\n{quoted}"


def absolute_url(src: str, base_url: str) -> str:
    """Prefix root-relative ``src`` with ``base_url``; leave anything else alone."""
    if src.startswith("/") and not src.startswith("//"):
        return base_url + src
    return src


def _rewrite_captioned_image(match: re.Match, base_url: str) -> str:
    try:
        from bs4 import BeautifulSoup
    except ImportError:
        raise RuntimeError("beautifulsoup4 is not installed. Run: pip install beautifulsoup4")

    caption = match.group(2).strip()
    img = BeautifulSoup(match.group(1), "html.parser").find("img")
    src = (img.get("src") or "") if img else ""
    alt = (img.get("alt") or caption) if img else caption
    return f"![{alt}]({absolute_url(src, base_url)})\n\n*{caption}*"


_INLINE_MARKS = {"strong": "**", "b": "**", "em": "*", "i": "*", "code": "`"}


def _unwrap_styled(match: re.Match, base_url: str) -> str:
    """Replace a styled element with its text, keeping its markdown meaning."""
    tag, inner = match.group(1).lower(), match.group(2).strip()
    if not inner:
        return ""
    if tag == "h4":
        return f"**{inner}**\n"
    if re.fullmatch(r"h[1-6]", tag):
        return f"{'#' * int(tag[1])} {inner}\n"
    mark = _INLINE_MARKS.get(tag, "")
    return f"{mark}{inner}{mark}"


# ──────────────────────────────────────────────────────────────
# Catalogue
# ──────────────────────────────────────────────────────────────

_MARGIN_24 = r"margin:\s*['\"]24px 0['\"]"

CATALOGUE = (
    Recognizer(
        BlockKind.CALLOUT,
        re.compile(r"<Callout\s+type=[\"'](\w+)[\"']\s*>\s*(.*?)\s*</Callout>", re.DOTALL),
        _rewrite_callout,
    ),
    Recognizer(BlockKind.STEP_SEQUENCE, re.compile(r"<Steps>\s*"), _fixed("")),
    Recognizer(BlockKind.STEP_SEQUENCE, re.compile(r"\s*</Steps>"), _fixed("")),
    Recognizer(
        BlockKind.COMPARISON_GRID,
        re.compile(
            r"<div style=\{\{\s*display:\s*['\"]grid['\"],\s*gridTemplateColumns"
            r".*?一次到位.*?</p>\s*</div>\s*</div>\s*</div>",
            re.DOTALL,
        ),
        _fixed(COMPARISON_TABLE),
    ),
    Recognizer(
        BlockKind.WORKFLOW_DIAGRAM,
        re.compile(
            r"<div style=\{\{[^}]*" + _MARGIN_24 + r"[^}]*padding"
            r".*?1\.\s*研究阶段.*?等待用户确认再编码.*?</div>\s*</div>",
            re.DOTALL,
        ),
        _fixed(WORKFLOW_DIAGRAM),
    ),
    Recognizer(
        BlockKind.ARCHITECTURE_TABLE,
        re.compile(
            r"<div style=\{\{[^}]*" + _MARGIN_24 + r"[^}]*\}\}>\s*"
            r"<div style=\{\{[^}]*marginBottom"
            r".*?沟通风格.*?</div>\s*</div>\s*</div>\s*</div>\s*</div>",
            re.DOTALL,
        ),
        _fixed(ARCHITECTURE_TABLE),
    ),
    Recognizer(
        BlockKind.HIERARCHY_DIAGRAM,
        re.compile(
            r"<div style=\{\{[^}]*margin:[^}]*\}\}>\s*"
            r"<div style=\{\{[^}]*display:\s*['\"]flex['\"][^}]*flexDirection:\s*['\"]column['\"]"
            r".*?项目级配置.*?全局配置.*?</div>\s*</div>",
            re.DOTALL,
        ),
        _fixed(HIERARCHY_DIAGRAM),
    ),
    Recognizer(
        BlockKind.GENERIC_WRAPPER,
        re.compile(r"<div[^>]*>\s*(<img[^>]*>)\s*<p[^>]*>([^<]*)</p>\s*</div>"),
        _rewrite_captioned_image,
    ),
    Recognizer(BlockKind.GENERIC_WRAPPER, re.compile(r"<div\b[^>]*>\s*"), _fixed("")),
    Recognizer(BlockKind.GENERIC_WRAPPER, re.compile(r"</div>"), _fixed("")),
    # Nested styled elements unwrap one level per round
    Recognizer(
        BlockKind.GENERIC_WRAPPER,
        re.compile(
            r"<([A-Za-z][\w-]*)\s+style=\{\{(?:[^{}]|\{[^{}]*\})*\}\}\s*>"
            r"((?:[^<]|<(?!/?\1\b)[^>]*>)*?)</\1>"
        ),
        _unwrap_styled,
        repeat=True,
    ),
    Recognizer(
        BlockKind.GENERIC_WRAPPER,
        re.compile(r"<p>([^<]*)</p>"),
        lambda match, base_url: match.group(1),
    ),
    Recognizer(BlockKind.GENERIC_WRAPPER, re.compile(r"<br\s*/?>"), _fixed("\n")),
)


def rewrite_blocks(text: str, base_url: str) -> str:
    """Run every recognizer over ``text`` in catalogue order."""
    for recognizer in CATALOGUE:
        text = recognizer.apply(text, base_url)
    return text


def recognizers_for(kind: BlockKind) -> tuple[Recognizer, ...]:
    return tuple(r for r in CATALOGUE if r.kind is kind)
