#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文档注释提取器工厂
根据文件扩展名返回对应的提取器
"""

from pathlib import Path

from . import config
from .base_extractor import BaseExtractor
from .js_extractors import DocCommentExtractor


class ExtractorFactory:
    """文档注释提取器工厂类"""

    @staticmethod
    def get_extractor(file_path: Path) -> BaseExtractor:
        """
        根据文件扩展名获取对应的文档注释提取器

        Args:
            file_path: 源代码文件路径

        Returns:
            对应语言的提取器

        Raises:
            ValueError: 当文件扩展名不被支持时
        """
        ext = file_path.suffix.lower()
        if ext in config.get_extensions():
            return DocCommentExtractor
        raise ValueError(f"不支持的文件类型: {ext or file_path.name}")
