"""
pytest 配置

提供缓存设置和日志捕获夹具。
"""

from typing import List

import pytest
from loguru import logger

from binfetch.models import CacheSettings


@pytest.fixture
def cache_dir(tmp_path):
    """临时缓存目录"""
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def settings(cache_dir):
    return CacheSettings(cache_dir=str(cache_dir))


@pytest.fixture
def log_messages():
    """捕获 loguru 日志消息"""
    messages: List[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
