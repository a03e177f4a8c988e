#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
JavaScript/TypeScript文档注释提取器实现
"""

import logging
from typing import List

from .base_extractor import BaseExtractor, DocBlock
from .normalizer import normalize
from .scanner import scan_comments

logger = logging.getLogger("DocCommentMD")


class DocCommentExtractor(BaseExtractor):
    """`///` 与 `/** */` 文档注释提取器"""

    @staticmethod
    def extract_comments(text: str) -> List[DocBlock]:
        """
        从源文本中提取文档注释
        支持三斜线(///)和块(/** */)注释

        Args:
            text: 源文件全文

        Returns:
            按源文本顺序排列的DocBlock列表
        """
        blocks = []
        for token in scan_comments(text):
            block = normalize(token)
            if block is None:
                logger.debug(f"跳过空注释: {token.style.value}")
                continue
            blocks.append(block)
        return blocks
