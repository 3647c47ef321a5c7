"""
Unit tests for the presentational-block recognizers.
"""

import pytest

from crossposter.config import CALLOUT_EMOJI, CALLOUT_TITLE
from crossposter.converters.blocks import (
    CATALOGUE,
    BlockKind,
    absolute_url,
    recognizers_for,
    rewrite_blocks,
)
from tests.fixtures import (
    ARCHITECTURE_TABLE,
    CALLOUT_WARNING,
    CAPTIONED_IMAGE,
    COMPARISON_GRID,
    HIERARCHY_DIAGRAM,
    STEPS_BLOCK,
    WORKFLOW_DIAGRAM,
    WORKFLOW_DIAGRAM_REWORDED,
)


BASE = "https://claude-code-academy.com"


def assert_no_markup(text):
    assert "<div" not in text
    assert "</div>" not in text
    assert "style=" not in text


class TestCatalogue:
    """Tests for the ordering of the recognizer catalogue."""

    def test_kinds_follow_priority_order(self):
        order = list(BlockKind)
        positions = [order.index(r.kind) for r in CATALOGUE]
        assert positions == sorted(positions)

    def test_every_kind_has_a_recognizer(self):
        for kind in BlockKind:
            assert recognizers_for(kind), kind


class TestCallout:
    """Tests for callout rewriting."""

    def test_warning_callout(self):
        result = rewrite_blocks(CALLOUT_WARNING, BASE)
        assert result == (
            f"> {CALLOUT_EMOJI['warning']} **{CALLOUT_TITLE['warning']}**\n"
            ">\n"
            "> CLAUDE.md 不是越长越好。\n"
            "> 保持精简。\n"
        )

    @pytest.mark.parametrize("callout_type,emoji,title", [
        ("info", "💡", "提示"),
        ("error", "🚫", "警告"),
        ("danger", "🚫", "警告"),
        ("success", "✅", "成功"),
    ])
    def test_known_types(self, callout_type, emoji, title):
        result = rewrite_blocks(f"<Callout type='{callout_type}'>正文</Callout>", BASE)
        assert result.startswith(f"> {emoji} **{title}**\n")

    def test_unknown_type_uses_default(self):
        result = rewrite_blocks('<Callout type="note">x</Callout>', BASE)
        assert result == "> 📌 **备注**\n>\n> x"

    def test_blank_inner_lines_stay_quoted(self):
        result = rewrite_blocks('<Callout type="info">\na\n\nb\n</Callout>', BASE)
        assert result.endswith("> a\n>\n> b")


class TestStepSequence:
    def test_markers_removed_headings_kept(self):
        result = rewrite_blocks(STEPS_BLOCK, BASE)
        assert "<Steps>" not in result
        assert "</Steps>" not in result
        assert "### 创建文件\n在项目根目录创建 CLAUDE.md。" in result
        assert "按模块组织内容。\n\n完成。" in result


class TestCuratedSubstitutes:
    """Tests for the one-off diagram and table replacements."""

    def test_comparison_grid(self):
        result = rewrite_blocks(COMPARISON_GRID, BASE)
        assert "| 没有 CLAUDE.md | 有 CLAUDE.md |" in result
        assert "| **反复修改 3-5 次** | **一次到位** |" in result
        assert_no_markup(result)

    def test_workflow_diagram(self):
        result = rewrite_blocks(WORKFLOW_DIAGRAM, BASE)
        assert "**三阶段工作流程**" in result
        assert "│  1. 研究阶段    │ →  │  2. 计划阶段    │" in result
        assert "⚠️ 等待用户确认再编码\n```" in result
        assert_no_markup(result)

    def test_architecture_table(self):
        result = rewrite_blocks(ARCHITECTURE_TABLE, BASE)
        assert "**CLAUDE.md 模块架构（按重要性排序）**" in result
        assert "| 🔴 高 | 核心工作流程 | 研究→计划→实现 |" in result
        assert "| 🔵 低 | 沟通风格 | 语言偏好+交互方式 |" in result
        assert_no_markup(result)

    def test_hierarchy_diagram(self):
        result = rewrite_blocks(HIERARCHY_DIAGRAM, BASE)
        assert "**配置文件优先级**" in result
        assert "│  位置：~/.claude/CLAUDE.md                 │" in result
        assert_no_markup(result)

    def test_reworded_workflow_degrades_to_generic_wrapper(self):
        result = rewrite_blocks(WORKFLOW_DIAGRAM_REWORDED, BASE)
        assert "三阶段工作流程" not in result
        assert "```" not in result
        assert "1. 研究阶段" in result
        assert "确认之后再动手" in result
        assert_no_markup(result)

    def test_curated_kinds_need_their_phrases(self):
        text = COMPARISON_GRID.replace("一次到位", "一次完成")
        result = rewrite_blocks(text, BASE)
        assert "| 没有 CLAUDE.md | 有 CLAUDE.md |" not in result
        assert "一次完成" in result


class TestGenericWrapper:
    """Tests for the catch-all styling removal."""

    def test_captioned_image(self):
        result = rewrite_blocks(CAPTIONED_IMAGE, BASE)
        assert result.strip() == (
            f"![CLAUDE.md 示意图]({BASE}/images/claude-md.png)\n\n*图1：CLAUDE.md 的作用*"
        )

    def test_captioned_image_alt_falls_back_to_caption(self):
        text = '<div><img src="https://cdn.example.com/a.png" /><p>说明</p></div>'
        assert rewrite_blocks(text, BASE) == "![说明](https://cdn.example.com/a.png)\n\n*说明*"

    def test_styled_heading_becomes_bold(self):
        result = rewrite_blocks("<h4 style={{ margin: 0 }}>小标题</h4>", BASE)
        assert result == "**小标题**\n"

    def test_paragraphs_and_spans_keep_text(self):
        text = "<p style={{ color: 'red' }}>一</p> <p>二</p> <span style={{ fontWeight: 600 }}>三</span>"
        assert rewrite_blocks(text, BASE) == "一 二 三"

    def test_nested_styled_wrappers_unwrap_completely(self):
        text = "<p style={{ color: 'red' }}>A <span style={{ fontWeight: 600 }}>B</span> C</p>"
        assert rewrite_blocks(text, BASE) == "A B C"

    def test_styled_inline_elements_keep_markdown_meaning(self):
        text = (
            "<strong style={{ color: '#111' }}>重点</strong> "
            "<code style={{ padding: 2 }}>npm test</code>\n"
            "<h2 style={{ margin: 0 }}>章节</h2>"
        )
        assert rewrite_blocks(text, BASE) == "**重点** `npm test`\n## 章节\n"

    def test_styled_span_around_plain_tag(self):
        text = "<span style={{ color: 'red' }}>x <b>y</b></span>"
        assert rewrite_blocks(text, BASE) == "x <b>y</b>"

    def test_line_breaks(self):
        assert rewrite_blocks("a<br/>b<br>c<br />d", BASE) == "a\nb\nc\nd"

    def test_plain_text_untouched(self):
        text = "# Title\n\nJust **markdown** here.\n"
        assert rewrite_blocks(text, BASE) == text


class TestAbsoluteUrl:
    def test_root_relative(self):
        assert absolute_url("/img/x.png", BASE) == f"{BASE}/img/x.png"

    def test_absolute_and_relative_unchanged(self):
        assert absolute_url("https://a.com/x.png", BASE) == "https://a.com/x.png"
        assert absolute_url("img/x.png", BASE) == "img/x.png"
        assert absolute_url("//cdn.com/x.png", BASE) == "//cdn.com/x.png"
