#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
抽象文档注释提取器基类
定义注释数据模型与提取器统一接口
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List


class CommentStyle(Enum):
    """文档注释风格"""

    TRIPLE_SLASH = "///"
    BLOCK_STAR = "/**"


@dataclass(frozen=True)
class CommentToken:
    """扫描得到的原始注释（不含定界符）"""

    style: CommentStyle
    raw: str


@dataclass(frozen=True)
class DocBlock:
    """规范化后的一段文档文本"""

    text: str
    style: CommentStyle


class BaseExtractor(ABC):
    """所有文档注释提取器必须继承的抽象基类"""

    @staticmethod
    @abstractmethod
    def extract_comments(text: str) -> List[DocBlock]:
        """
        从源文本中提取文档注释
        返回按出现顺序排列的文档块

        Args:
            text: 源文件全文

        Returns:
            非空DocBlock列表
        """
        pass
