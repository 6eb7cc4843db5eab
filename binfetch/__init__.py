"""
BinFetch - 运行时二进制文件下载与缓存工具
"""

from binfetch.download import CacheManager, Downloader, ManifestVerifier, ensure_cached
from binfetch.exceptions import BinFetchError
from binfetch.models import CacheSettings

__version__ = "0.1.0"

__all__ = [
    "CacheManager",
    "Downloader",
    "ManifestVerifier",
    "ensure_cached",
    "BinFetchError",
    "CacheSettings",
    "__version__",
]
