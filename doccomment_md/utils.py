#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utility functions for DocCommentMD
"""

from pathlib import Path
from typing import Iterable, List

import questionary

from . import config


def scan_source_files(directory: Path) -> List[Path]:
    """递归扫描目录中的源代码文件

    Args:
        directory: Root directory to scan

    Returns:
        Sorted list of Path objects to source files
    """
    extensions = config.get_extensions()
    return sorted(
        p for p in directory.rglob("*.*")
        if p.suffix.lower() in extensions
        if p.is_file()
        and not p.name.startswith(".")
        and not any(part in config.EXCLUDED_DIRS for part in p.relative_to(directory).parts)
    )


def collect_sources(paths: Iterable[Path]) -> List[Path]:
    """展开命令行给出的文件和目录，去重并保持顺序

    Args:
        paths: Files or directories

    Returns:
        List of source files
    """
    seen = set()
    result = []
    for path in paths:
        files = scan_source_files(path) if path.is_dir() else [path]
        for file in files:
            key = file.resolve()
            if key not in seen:
                seen.add(key)
                result.append(file)
    return result


def confirm_dangerous(action: str) -> bool:
    """危险操作确认提示

    Args:
        action: Description of dangerous action

    Returns:
        True if user confirms, False otherwise
    """
    return bool(questionary.confirm(
        f"你确定要{action}吗？",
        default=False
    ).ask())
