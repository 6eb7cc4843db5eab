"""
缓存管理器

确保文件已下载到缓存目录，并在提供校验清单时完成 SHA256 校验。
"""

from typing import Optional

from loguru import logger

from binfetch.download.downloader import Downloader
from binfetch.download.verifier import ManifestVerifier
from binfetch.models import CacheEntry, CacheSettings
from binfetch.utils import url_basename


class CacheManager:
    """缓存管理器"""

    def __init__(
        self,
        settings: Optional[CacheSettings] = None,
        downloader: Optional[Downloader] = None,
        verifier: Optional[ManifestVerifier] = None,
    ):
        self.settings = settings or CacheSettings()
        self.downloader = downloader or Downloader(self.settings)
        self.verifier = verifier or ManifestVerifier()
        self._owned_downloader = downloader is None

    def entry(self, file_name: str) -> CacheEntry:
        """获取缓存条目"""
        return CacheEntry(self.settings.cache_dir, file_name)

    async def ensure_cached(
        self,
        file_name: str,
        file_url: str,
        manifest_name: Optional[str] = None,
        manifest_url: Optional[str] = None,
    ) -> str:
        """
        确保文件已缓存且有效

        提供校验清单时，清单总是重新下载，文件仅在不存在时下载，
        然后根据清单校验。未提供清单且文件已存在时直接返回，不做校验。

        Args:
            file_name: 缓存文件名
            file_url: 文件下载地址
            manifest_name: 校验清单缓存文件名
            manifest_url: 校验清单下载地址

        Returns:
            缓存文件的绝对路径
        """
        entry = self.entry(file_name)
        file_exists = entry.exists()

        if manifest_name and manifest_url:
            manifest_path = self.entry(manifest_name).path
            await self.downloader.download(manifest_path, manifest_url)
            if not file_exists:
                await self.downloader.download(entry.path, file_url, skip_banner=True)
            await self.verifier.verify(
                entry.path, manifest_path, url_basename(file_url)
            )
            return entry.path

        if not file_exists:
            await self.downloader.download(entry.path, file_url)
            return entry.path

        logger.debug(f"[跳过] '{file_name}' 已缓存")
        return entry.path

    async def close(self):
        """关闭缓存管理器"""
        if self._owned_downloader:
            await self.downloader.close()

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()


async def ensure_cached(
    file_name: str,
    file_url: str,
    manifest_name: Optional[str] = None,
    manifest_url: Optional[str] = None,
    settings: Optional[CacheSettings] = None,
) -> str:
    """使用临时缓存管理器确保文件已缓存"""
    async with CacheManager(settings) as manager:
        return await manager.ensure_cached(
            file_name, file_url, manifest_name, manifest_url
        )
