"""
配置加载

支持 TOML、JSON、YAML 格式的配置文件。
"""

import json
from pathlib import Path
from typing import Optional

import toml
import yaml

from binfetch.exceptions import ConfigError, ConfigParseError
from binfetch.models import CacheSettings


def load_config(config_path: str) -> dict:
    """加载配置文件"""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"配置文件不存在: {config_path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            data = toml.load(config_path)
        elif suffix == ".json":
            data = json.loads(path.read_text())
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(path.read_text())
        else:
            raise ConfigError(f"不支持的配置文件格式: {suffix}")
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigParseError(
            f"配置文件解析失败: {config_path}", context={"error": str(e)}
        ) from e

    return data or {}


def load_settings(config_path: Optional[str] = None) -> CacheSettings:
    """加载缓存设置，未指定配置文件时使用默认值"""
    if config_path is None:
        return CacheSettings()
    return CacheSettings.from_dict(load_config(config_path))
