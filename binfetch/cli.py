"""
CLI 模块

命令行接口实现。
"""

import asyncio
import os
from dataclasses import replace
from typing import Optional

import click
from loguru import logger

from binfetch.config import load_settings
from binfetch.download import CacheManager
from binfetch.exceptions import BinFetchError
from binfetch.logger import setup_logger
from binfetch.models import CacheSettings
from binfetch.utils import url_basename


async def run_async(
    settings: CacheSettings,
    url: str,
    name: str,
    manifest_url: Optional[str],
    manifest_name: Optional[str],
) -> str:
    """异步运行"""
    os.makedirs(settings.cache_dir, exist_ok=True)
    async with CacheManager(settings) as manager:
        return await manager.ensure_cached(name, url, manifest_name, manifest_url)


@click.command()
@click.argument("url")
@click.option("-n", "--name", help="缓存文件名（默认取 URL 最后一段）")
@click.option("--manifest-url", help="SHASUMS256 校验清单地址")
@click.option("--manifest-name", help="校验清单缓存文件名")
@click.option("--cache-dir", type=click.Path(file_okay=False), help="缓存目录")
@click.option("-c", "--config", type=click.Path(exists=True), help="配置文件路径")
@click.option("-q", "--quiet", is_flag=True, help="不输出下载信息")
@click.option(
    "--debug", is_flag=True, envvar="BINFETCH_DEBUG", help="启用调试模式"
)
@click.version_option(version="0.1.0")
def main(
    url: str,
    name: Optional[str],
    manifest_url: Optional[str],
    manifest_name: Optional[str],
    cache_dir: Optional[str],
    config: Optional[str],
    quiet: bool,
    debug: bool,
):
    """BinFetch - 下载并缓存运行时二进制文件"""
    setup_logger(debug=debug, quiet=quiet)

    try:
        settings = load_settings(config)
        if cache_dir:
            settings = replace(settings, cache_dir=cache_dir)
        if quiet:
            settings = replace(settings, quiet=True)

        name = name or url_basename(url)
        if not name:
            raise click.UsageError(f"无法从 URL 推断文件名: {url}")
        if manifest_url and not manifest_name:
            manifest_name = url_basename(manifest_url)

        path = asyncio.run(
            run_async(settings, url, name, manifest_url, manifest_name)
        )
    except BinFetchError as e:
        logger.error(f"下载错误: {e}")
        if e.cause is not None:
            logger.debug(f"原因: {e.cause}")
        raise click.ClickException(str(e))

    click.echo(path)


if __name__ == "__main__":
    main()
