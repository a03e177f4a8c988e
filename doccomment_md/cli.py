#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DocCommentMD - 文档注释转Markdown工具
把源文件中的 `///` 与 `/** */` 文档注释拼接为Markdown文档
"""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from tqdm import tqdm

from .document import MarkdownWriter
from .utils import collect_sources, confirm_dangerous

# 配置彩色日志
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("DocCommentMD")


# ---------------------- CLI命令实现 ----------------------
@click.group()
@click.option("--verbose", is_flag=True, help="显示调试信息")
def cli(verbose):
    """文档注释转Markdown工具"""
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("调试模式已启用")


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="覆盖已有的非生成文件时不再确认")
@click.pass_context
def build(ctx, paths, yes):
    """为文件或目录中的源文件生成Markdown文档"""
    sources = collect_sources(paths)
    if not sources:
        print("[yellow]! 未找到源文件[/]")
        return

    writer = MarkdownWriter()
    confirm = None if yes else (lambda output: confirm_dangerous(f"覆盖 {output}"))
    written, failed = 0, 0

    for source in tqdm(sources, desc="处理文件中", disable=len(sources) < 2):
        try:
            result = writer.build(source, confirm_overwrite=confirm)
        except (ValueError, OSError, UnicodeDecodeError) as e:
            logger.error(f"处理失败: {source} - {str(e)}")
            failed += 1
            continue
        if result:
            print(f"Wrote {result.block_count} comments to {escape(str(result.output))}")
            written += 1

    print(f"[bold green]✓ 已生成{written}个文档[/] (共{len(sources)}个源文件)")
    if failed:
        print(f"[red]✗ {failed}个文件处理失败[/]")
        ctx.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def extract(file):
    """输出生成的Markdown而不写入文件"""
    try:
        output, blocks, markdown = MarkdownWriter().render(file)
    except (ValueError, OSError, UnicodeDecodeError) as e:
        logger.error(f"处理失败: {file} - {str(e)}")
        raise click.exceptions.Exit(1)
    if not blocks:
        print("[yellow]! 未找到文档注释[/]")
        return
    logger.debug(f"目标文件: {output}")
    click.echo(markdown)


def main():
    load_dotenv()  # 加载环境变量
    cli()


# ---------------------- 主入口 ----------------------
if __name__ == "__main__":
    main()
