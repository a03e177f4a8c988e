#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文档注释规范化
去除 `*` 列等装饰字符，把CommentToken转换为DocBlock
"""

import re
from enum import Enum
from typing import List, Optional

from .base_extractor import CommentStyle, CommentToken, DocBlock

STAR_LINE_RE = re.compile(r"^[ \t]*\*")
STAR_PREFIX_RE = re.compile(r"^[ \t]*\* ?")


class StarMode(Enum):
    """块注释是否逐行去除左侧 `*` 列"""

    STRIP = "strip"
    KEEP = "keep"


def detect_star_mode(lines: List[str]) -> StarMode:
    """根据首行判断星号模式（调用前已去掉空白首行）"""
    if lines and STAR_LINE_RE.match(lines[0]):
        return StarMode.STRIP
    return StarMode.KEEP


def normalize_block(raw: str) -> Optional[str]:
    """规范化 `/** ... */` 注释正文

    Args:
        raw: 去掉定界符后的注释正文

    Returns:
        规范化文本，空注释返回None
    """
    lines = raw.split("\n")

    if not lines[0].strip():
        # `/**` 后直接换行，这是最常见的写法
        lines = lines[1:]
        if not lines:
            return None
        mode = detect_star_mode(lines)
    else:
        # `/** foo` 同一行开始正文
        lines[0] = lines[0].lstrip()
        mode = StarMode.KEEP

    if mode is StarMode.STRIP:
        # 没有 `*` 前缀的行保持原样（保留缩进代码块）
        lines = [STAR_PREFIX_RE.sub("", line, count=1) for line in lines]

    result = "\n".join(lines)
    return result if result.strip() else None


def normalize(token: CommentToken) -> Optional[DocBlock]:
    """把一个CommentToken转换为零个或一个DocBlock

    Args:
        token: 扫描器产出的原始注释

    Returns:
        DocBlock，注释为空时返回None
    """
    if token.style is CommentStyle.TRIPLE_SLASH:
        text = token.raw if token.raw.strip() else None
    else:
        text = normalize_block(token.raw)

    if text is None:
        return None
    return DocBlock(text=text, style=token.style)
