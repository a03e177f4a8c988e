"""
DocCommentMD - 从源文件文档注释生成Markdown
"""

from .base_extractor import CommentStyle, CommentToken, DocBlock
from .js_extractors import DocCommentExtractor

__all__ = ["CommentStyle", "CommentToken", "DocBlock", "DocCommentExtractor"]
