"""
BinFetch 统一异常体系

提供分层的异常结构，支持错误代码、上下文信息、原因链和 JSON 序列化。
"""

from typing import Any, Dict, Optional


class BinFetchError(Exception):
    """BinFetch 基础异常类"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        """获取默认错误代码"""
        return "E000"

    @property
    def cause(self) -> Optional[BaseException]:
        """引发此异常的底层异常（通过 raise ... from 设置）"""
        return self.__cause__

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        data = {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }
        if self.cause is not None:
            cause = self.cause
            data["cause"] = (
                cause.to_dict() if isinstance(cause, BinFetchError) else str(cause)
            )
        return data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(BinFetchError):
    """配置相关错误"""

    def _get_default_code(self) -> str:
        return "E100"


class ConfigParseError(ConfigError):
    """配置解析错误"""

    def _get_default_code(self) -> str:
        return "E101"


class HTTPStatusError(BinFetchError):
    """非 200 的 HTTP 响应状态，作为下载错误的原因"""

    def __init__(self, status: int, context: Optional[Dict[str, Any]] = None):
        super().__init__(f"HTTP 响应状态: {status}", context=context)
        self.status = status
        self.context["status"] = status

    def _get_default_code(self) -> str:
        return "E200"


class DownloadError(BinFetchError):
    """下载相关错误"""

    def _get_default_code(self) -> str:
        return "E300"


class DownloadFailedError(DownloadError):
    """下载失败（HTTP 错误或网络错误）"""

    def _get_default_code(self) -> str:
        return "E301"


class NotAvailableError(DownloadError):
    """远程文件不存在 (HTTP 404)"""

    def _get_default_code(self) -> str:
        return "E404"


class CacheAccessError(BinFetchError):
    """无法访问缓存文件"""

    def _get_default_code(self) -> str:
        return "E310"


class VerificationError(BinFetchError):
    """校验相关错误"""

    def _get_default_code(self) -> str:
        return "E320"


class ManifestEntryMissingError(VerificationError):
    """校验清单中没有该文件的条目"""

    def _get_default_code(self) -> str:
        return "E321"


class ChecksumMismatchError(VerificationError):
    """SHA256 校验值不匹配"""

    def _get_default_code(self) -> str:
        return "E322"


class HashComputationError(VerificationError):
    """无法计算文件哈希"""

    def _get_default_code(self) -> str:
        return "E323"


__all__ = [
    # 基础异常
    "BinFetchError",
    # 配置异常
    "ConfigError",
    "ConfigParseError",
    # 下载异常
    "HTTPStatusError",
    "DownloadError",
    "DownloadFailedError",
    "NotAvailableError",
    # 缓存异常
    "CacheAccessError",
    # 校验异常
    "VerificationError",
    "ManifestEntryMissingError",
    "ChecksumMismatchError",
    "HashComputationError",
]
