#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Markdown文档生成与写入
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from . import config
from .base_extractor import DocBlock
from .extractor_factory import ExtractorFactory

logger = logging.getLogger("DocCommentMD")

# 文件开头的魔法标记：输出改为同目录下的 README.md
README_MARKER = "///!README"
ATTRIBUTION_PREFIX = "*This file is automatically generated from "


@dataclass
class BuildResult:
    """单个源文件的生成结果"""

    source: Path
    output: Path
    block_count: int


def strip_readme_marker(text: str) -> Tuple[str, bool]:
    """去掉文件开头的 README 魔法标记

    Returns:
        (剩余文本, 是否存在标记)
    """
    if text.startswith(README_MARKER):
        return text[len(README_MARKER):], True
    return text, False


def resolve_output_path(source: Path, readme: bool = False) -> Path:
    """计算输出文件路径

    Args:
        source: 源文件路径
        readme: 是否使用 README.md

    Returns:
        输出Markdown路径
    """
    if readme:
        return source.parent / config.README_NAME
    # 仅替换 `.js`，其他扩展名保留（a.ts -> a.ts.md）
    if source.suffix == config.REPLACED_SUFFIX:
        return source.with_suffix(config.OUTPUT_SUFFIX)
    return source.with_name(source.name + config.OUTPUT_SUFFIX)


def render_markdown(blocks: List[DocBlock], display_name: str) -> str:
    """拼接文档：署名行 + 空行 + 各文档块（以空行分隔）"""
    attribution = f"{ATTRIBUTION_PREFIX}[`{display_name}`]({display_name}).*"
    return attribution + "\n\n" + "\n\n".join(block.text for block in blocks)


def is_generated(path: Path) -> bool:
    """判断已存在的文件是否由本工具生成"""
    try:
        with open(path, "r", encoding=config.get_encoding()) as f:
            head = f.read(len(ATTRIBUTION_PREFIX))
    except (OSError, UnicodeDecodeError):
        return False
    return head == ATTRIBUTION_PREFIX


class MarkdownWriter:
    """读取源文件、提取文档注释并写出Markdown"""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or config.get_encoding()
        # 本次运行已写出的输出路径 -> 源文件
        self.written: Dict[Path, Path] = {}

    def render(self, source: Path) -> Tuple[Path, List[DocBlock], str]:
        """生成文档内容但不写入

        Args:
            source: 源文件路径

        Returns:
            (输出路径, 文档块列表, Markdown文本)

        Raises:
            ValueError: 文件类型不被支持
            OSError: 读取失败
            UnicodeDecodeError: 编码错误
        """
        extractor = ExtractorFactory.get_extractor(source)
        text = source.read_text(encoding=self.encoding)
        text, readme = strip_readme_marker(text)
        output = resolve_output_path(source, readme)
        blocks = extractor.extract_comments(text)
        logger.debug(f"{source}: 提取到 {len(blocks)} 个文档块")
        return output, blocks, render_markdown(blocks, source.name)

    def build(
        self,
        source: Path,
        confirm_overwrite: Optional[Callable[[Path], bool]] = None,
    ) -> Optional[BuildResult]:
        """生成并写入文档；没有文档注释时不写任何文件

        Args:
            source: 源文件路径
            confirm_overwrite: 目标文件存在且非本工具生成时调用，返回False则跳过

        Returns:
            BuildResult，无文档注释、被跳过或输出路径本次已写过时返回None
        """
        output, blocks, markdown = self.render(source)
        if not blocks:
            logger.info(f"未找到文档注释，跳过: {source}")
            return None

        key = output.resolve()
        if key in self.written:
            logger.warning(f"{output} 已由 {self.written[key]} 生成，跳过: {source}")
            return None

        if output.exists() and not is_generated(output) and confirm_overwrite is not None:
            if not confirm_overwrite(output):
                logger.warning(f"保留已有文件: {output}")
                return None

        output.write_text(markdown, encoding=self.encoding)
        self.written[key] = source
        return BuildResult(source=source, output=output, block_count=len(blocks))
