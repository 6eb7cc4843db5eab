"""
清单校验器

解析 SHASUMS256 格式的校验清单，计算 SHA256 并与清单中的值比对。
"""

import hashlib
import os
import re
from typing import List, Optional

import aiofiles
from loguru import logger

from binfetch.exceptions import (
    ChecksumMismatchError,
    HashComputationError,
    ManifestEntryMissingError,
)
from binfetch.models import ManifestEntry

_LINE_SPLIT = re.compile(r"\s*\n\s*")
_FIELD_SPLIT = re.compile(r" +")


def parse_manifest(text: str) -> List[ManifestEntry]:
    """
    解析校验清单文本

    每行格式为 "<十六进制摘要><一个或多个空格><文件名>"，
    不是恰好两个字段的行会被忽略。
    """
    entries = []
    for line in _LINE_SPLIT.split(text.strip()):
        if not line:
            continue
        parts = _FIELD_SPLIT.split(line)
        if len(parts) == 2 and parts[0]:
            entries.append(ManifestEntry(file_name=parts[1], digest=parts[0]))
    return entries


def find_digest(entries: List[ManifestEntry], name: str) -> Optional[str]:
    """查找文件名对应的摘要，多个匹配时以最后一个为准"""
    digest = None
    for entry in entries:
        if entry.matches(name):
            digest = entry.digest
    return digest


class ManifestVerifier:
    """清单校验器"""

    def __init__(self, chunk_size: int = 64 * 1024):
        self.chunk_size = chunk_size

    async def compute_sha256(self, file_path: str) -> str:
        """
        流式计算文件的 SHA256

        Raises:
            HashComputationError: 文件读取失败或未得到摘要
        """
        sha256 = hashlib.sha256()
        try:
            async with aiofiles.open(file_path, "rb") as f:
                while True:
                    data = await f.read(self.chunk_size)
                    if not data:
                        break
                    sha256.update(data)
        except OSError as e:
            raise HashComputationError(
                f"无法计算文件哈希: {os.path.basename(file_path)}",
                context={"path": file_path},
            ) from e

        digest = sha256.hexdigest()
        if not digest:
            raise HashComputationError(
                f"无法计算文件哈希: {os.path.basename(file_path)}",
                context={"path": file_path},
            )
        return digest

    async def read_manifest(self, manifest_path: str) -> List[ManifestEntry]:
        """读取并解析校验清单"""
        async with aiofiles.open(
            manifest_path, "r", encoding="utf-8", errors="replace"
        ) as f:
            return parse_manifest(await f.read())

    async def verify(
        self,
        file_path: str,
        manifest_path: str,
        lookup_name: Optional[str] = None,
    ) -> None:
        """
        根据清单校验缓存文件

        Args:
            file_path: 缓存文件路径
            manifest_path: 校验清单路径
            lookup_name: 在清单中查找的文件名，默认为缓存文件名

        Raises:
            ManifestEntryMissingError: 清单中没有该文件
            ChecksumMismatchError: 校验值不匹配（缓存文件已被删除）
            HashComputationError: 无法计算哈希
        """
        file_name = os.path.basename(file_path)
        lookup_name = (lookup_name or file_name).lower()

        expected = find_digest(await self.read_manifest(manifest_path), lookup_name)
        if not expected:
            raise ManifestEntryMissingError(
                f"清单中未找到文件的 SHA256 值: {file_name}",
                context={"file": file_name, "manifest": manifest_path},
            )

        actual = await self.compute_sha256(file_path)
        if actual != expected:
            try:
                os.remove(file_path)
            except OSError as e:
                logger.warning(f"[清理] 删除校验失败的文件 '{file_name}' 失败: {e}")
            raise ChecksumMismatchError(
                f"缓存文件 SHA256 不匹配: {file_name}",
                context={"file": file_name, "expected": expected, "actual": actual},
            )

        logger.debug(f"[校验] '{file_name}' SHA256 校验通过")
