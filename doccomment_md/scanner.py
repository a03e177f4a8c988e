#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文档注释扫描器
在源文本上单次前向扫描，依次产出CommentToken
"""

import re
from typing import Iterator, Optional, Tuple

from .base_extractor import CommentStyle, CommentToken

# 行首 + 可选空白(不含换行) + `///`(组1) 或 `/**`(组2)，其后不能是 `/` 或 `*`
OPENER_RE = re.compile(r"^[ \t]*(?:(///)|(/\*\*))(?![/*])", re.MULTILINE)
# 游标位置本身也视为行首
OPENER_AT_CURSOR_RE = re.compile(r"[ \t]*(?:(///)|(/\*\*))(?![/*])")
CONTINUATION_RE = re.compile(r"\n[ \t]*///[ \t]?")
BLOCK_CLOSER = "*/"

# (消耗长度, 可选token)
Extraction = Tuple[int, Optional[CommentToken]]


def find_next_opener(text: str, pos: int = 0) -> Optional[Tuple[CommentStyle, int]]:
    """查找pos之后的下一个文档注释起始符

    Args:
        text: 源文本
        pos: 起始扫描位置

    Returns:
        (注释风格, 起始符之后的位置)，找不到时返回None
    """
    match = OPENER_AT_CURSOR_RE.match(text, pos) or OPENER_RE.search(text, pos)
    if not match:
        return None
    style = CommentStyle.TRIPLE_SLASH if match.group(1) else CommentStyle.BLOCK_STAR
    return style, match.end()


def _rest_of_line(text: str, pos: int) -> str:
    end = text.find("\n", pos)
    return text[pos:] if end == -1 else text[pos:end]


def extract_triple_slash(text: str, pos: int) -> Extraction:
    """提取 `///` 注释，连续的 `///` 行合并为一个token

    Args:
        text: 源文本
        pos: 紧跟在 `///` 之后的位置

    Returns:
        (消耗长度, TRIPLE_SLASH token)
    """
    cursor = pos
    if text[cursor:cursor + 1] in (" ", "\t"):
        cursor += 1  # 仅去掉一个可选空格

    lines = [_rest_of_line(text, cursor)]
    cursor += len(lines[0])

    while True:
        match = CONTINUATION_RE.match(text, cursor)
        if not match:
            break
        cursor = match.end()
        line = _rest_of_line(text, cursor)
        cursor += len(line)
        lines.append(line)

    return cursor - pos, CommentToken(CommentStyle.TRIPLE_SLASH, "\n".join(lines))


def extract_block(text: str, pos: int) -> Extraction:
    """提取 `/** ... */` 注释

    未闭合的块注释被丢弃，消耗长度为0，扫描从起始符之后继续。

    Args:
        text: 源文本
        pos: 紧跟在 `/**` 之后的位置

    Returns:
        (消耗长度, BLOCK_STAR token 或 None)
    """
    close = text.find(BLOCK_CLOSER, pos)
    if close == -1:
        return 0, None

    raw = text[pos:close]
    if raw.endswith(" "):
        # 单行形式 `/** foo */`
        raw = raw[:-1]
    return close + len(BLOCK_CLOSER) - pos, CommentToken(CommentStyle.BLOCK_STAR, raw)


EXTRACTORS = {
    CommentStyle.TRIPLE_SLASH: extract_triple_slash,
    CommentStyle.BLOCK_STAR: extract_block,
}


def scan_comments(text: str) -> Iterator[CommentToken]:
    """按源文本顺序产出所有文档注释token

    Args:
        text: 源文本

    Yields:
        CommentToken
    """
    pos = 0
    while True:
        opener = find_next_opener(text, pos)
        if opener is None:
            return
        style, pos = opener
        consumed, token = EXTRACTORS[style](text, pos)
        pos += consumed
        if token is not None:
            yield token
