"""
下载器

将单个 URL 流式写入本地文件，失败时清理不完整的文件。
"""

import asyncio
import os
from typing import Optional

import aiofiles
import aiohttp
from loguru import logger

from binfetch.exceptions import (
    DownloadError,
    DownloadFailedError,
    HTTPStatusError,
    NotAvailableError,
)
from binfetch.models import CacheSettings, DownloadTarget
from binfetch.utils import home_path


class Downloader:
    """下载器"""

    def __init__(
        self,
        settings: Optional[CacheSettings] = None,
        session: Optional[aiohttp.ClientSession] = None,
        chunk_size: int = 8192,
    ):
        self.settings = settings or CacheSettings()
        self.chunk_size = chunk_size
        self._session = session
        self._owned_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """获取或创建 aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=None), auto_decompress=False
            )
        return self._session

    def _ssl_for(self, target: DownloadTarget) -> bool:
        """按 URL 协议选择传输方式"""
        if target.is_https:
            return self.settings.verify_ssl
        return False

    def _announce(self, target: DownloadTarget, skip_banner: bool) -> None:
        if self.settings.quiet:
            return
        if not skip_banner:
            logger.info("[下载] 正在下载...")
        logger.info(f"  {target.url} -> {home_path(target.file_path)}")

    async def download(
        self, file_path: str, url: str, skip_banner: bool = False
    ) -> str:
        """
        下载单个文件

        Args:
            file_path: 目标文件路径
            url: 下载地址
            skip_banner: 不输出"正在下载"标题行（用于连续下载）

        Returns:
            目标文件路径

        Raises:
            NotAvailableError: 远程返回 404
            DownloadFailedError: 其他 HTTP 错误或网络错误
        """
        target = DownloadTarget(file_path=file_path, url=url)
        self._announce(target, skip_banner)

        try:
            async with aiofiles.open(target.file_path, "wb") as f:
                await self._transfer(target, f)
        except (DownloadError, asyncio.CancelledError):
            self._discard(target)
            raise
        except Exception as e:
            self._discard(target)
            raise DownloadFailedError(
                f"下载文件失败: {url}", context={"url": url, "error": str(e)}
            ) from e

        logger.debug(f"[完成] '{os.path.basename(file_path)}' 下载完成")
        return file_path

    async def _transfer(self, target: DownloadTarget, f) -> None:
        """发送 GET 请求并把响应体写入已打开的文件"""
        # 原样写入响应体，不跟随重定向
        async with self.session.get(
            target.url,
            ssl=self._ssl_for(target),
            allow_redirects=False,
            auto_decompress=False,
        ) as response:
            if response.status == 200:
                async for chunk in response.content.iter_chunked(self.chunk_size):
                    await f.write(chunk)
                return

            context = {"url": target.url, "status": response.status}
            cause = HTTPStatusError(response.status, context={"url": target.url})
            if response.status == 404:
                raise NotAvailableError(
                    f"文件不可用: {target.url}", context=context
                ) from cause
            raise DownloadFailedError(
                f"下载文件失败: {target.url}", context=context
            ) from cause

    def _discard(self, target: DownloadTarget) -> None:
        """删除不完整的文件，删除失败不影响原始错误"""
        try:
            os.remove(target.file_path)
        except OSError as e:
            logger.debug(f"[清理] 无法删除 '{target.file_path}': {e}")

    async def close(self):
        """关闭下载器"""
        if self._owned_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()
