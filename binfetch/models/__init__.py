"""
BinFetch 数据模型包

包含配置模型和缓存模型定义。
"""

from binfetch.models.config import CacheSettings, default_cache_dir
from binfetch.models.cache import CacheEntry, ManifestEntry, DownloadTarget

__all__ = [
    # 配置模型
    "CacheSettings",
    "default_cache_dir",
    # 缓存模型
    "CacheEntry",
    "ManifestEntry",
    "DownloadTarget",
]
