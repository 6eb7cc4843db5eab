"""
缓存数据模型

定义缓存条目、校验清单条目和下载目标。
"""

import os
from dataclasses import dataclass

from binfetch.exceptions import CacheAccessError


@dataclass(frozen=True)
class CacheEntry:
    """
    缓存条目。

    磁盘上文件是否存在是判断"已缓存"的唯一依据，不保存任何元数据。
    """

    cache_dir: str
    file_name: str

    @property
    def path(self) -> str:
        return os.path.abspath(os.path.join(self.cache_dir, self.file_name))

    def exists(self) -> bool:
        """
        检查缓存文件是否存在

        Raises:
            CacheAccessError: 除"文件不存在"以外的访问错误
        """
        try:
            os.stat(self.path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise CacheAccessError(
                f"无法访问缓存文件: {self.file_name}",
                context={"path": self.path},
            ) from e
        return True


@dataclass(frozen=True)
class ManifestEntry:
    """校验清单条目"""

    file_name: str
    digest: str

    def matches(self, name: str) -> bool:
        """文件名比较不区分大小写"""
        return self.file_name.lower() == name.lower()


@dataclass(frozen=True)
class DownloadTarget:
    """下载目标，仅在一次传输期间存在"""

    file_path: str
    url: str

    @property
    def is_https(self) -> bool:
        return self.url.startswith("https:")
