"""
BinFetch 下载层

包含文件下载、校验清单校验和缓存管理。
"""

from binfetch.download.downloader import Downloader
from binfetch.download.verifier import ManifestVerifier, parse_manifest, find_digest
from binfetch.download.cache import CacheManager, ensure_cached

__all__ = [
    "Downloader",
    "ManifestVerifier",
    "parse_manifest",
    "find_digest",
    "CacheManager",
    "ensure_cached",
]
