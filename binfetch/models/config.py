"""
配置模型

定义缓存目录、静默模式等运行设置。
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict


def default_cache_dir() -> str:
    """默认缓存目录: $BINFETCH_HOME/cache"""
    home = os.environ.get("BINFETCH_HOME", "~/.binfetch")
    return os.path.join(os.path.expanduser(home), "cache")


@dataclass
class CacheSettings:
    """缓存设置"""

    cache_dir: str = field(default_factory=default_cache_dir)
    quiet: bool = False
    verify_ssl: bool = True  # 仅用于 https: 传输

    def __post_init__(self):
        self.cache_dir = os.path.abspath(os.path.expanduser(self.cache_dir))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheSettings":
        """从字典创建设置"""
        cache_dir = data.get("cache", data.get("cache_dir"))
        return cls(
            cache_dir=cache_dir if cache_dir else default_cache_dir(),
            quiet=bool(data.get("quiet", False)),
            verify_ssl=bool(data.get("verify_ssl", True)),
        )
