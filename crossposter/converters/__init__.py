from .markdown_converter import MarkdownConverter
from .wechat_converter import WechatConverter
from .blocks import BlockKind

__all__ = ["MarkdownConverter", "WechatConverter", "BlockKind"]
