#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DocCommentMD 配置常量
可通过环境变量（或 .env 文件）覆盖
"""

import os
from typing import Tuple

DEFAULT_EXTENSIONS = (".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx")
DEFAULT_ENCODING = "utf-8"
OUTPUT_SUFFIX = ".md"
# 输出时被替换掉的源文件扩展名
REPLACED_SUFFIX = ".js"
README_NAME = "README.md"

# 扫描目录时跳过的目录名
EXCLUDED_DIRS = ("node_modules", ".venv", ".git")


def get_extensions() -> Tuple[str, ...]:
    """读取支持的源文件扩展名（DOCCOMMENT_MD_EXTENSIONS，逗号分隔）"""
    raw = os.getenv("DOCCOMMENT_MD_EXTENSIONS")
    if not raw:
        return DEFAULT_EXTENSIONS
    exts = []
    for ext in raw.split(","):
        ext = ext.strip().lower()
        if ext:
            exts.append(ext if ext.startswith(".") else "." + ext)
    return tuple(exts) or DEFAULT_EXTENSIONS


def get_encoding() -> str:
    """读取源文件与输出文件编码（DOCCOMMENT_MD_ENCODING）"""
    return os.getenv("DOCCOMMENT_MD_ENCODING") or DEFAULT_ENCODING
