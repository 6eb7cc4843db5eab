"""
日志模块

命令行使用的 loguru 输出配置。库代码直接使用 loguru 的 logger，不在导入时修改处理器。
"""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
DEBUG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} | {message}"
)


def setup_logger(
    debug: bool = False,
    quiet: bool = False,
    sink=sys.stderr,
) -> int:
    """
    配置命令行日志输出

    Args:
        debug: 输出 DEBUG 级别日志及调用位置，优先于 quiet
        quiet: 只输出警告和错误（隐藏下载进度）
        sink: 输出目标，默认 stderr，stdout 留给缓存路径

    Returns:
        新添加的处理器 ID
    """
    if debug:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"

    logger.remove()
    handler_id = logger.add(
        sink,
        format=DEBUG_FORMAT if debug else LOG_FORMAT,
        level=level,
        backtrace=debug,
        diagnose=debug,
    )
    logger.debug("调试输出已启用")
    return handler_id


__all__ = ["logger", "setup_logger", "LOG_FORMAT", "DEBUG_FORMAT"]
