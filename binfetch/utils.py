import os
import posixpath
from urllib.parse import urlsplit


def home_path(path: str) -> str:
    """将用户主目录替换为 ~，用于显示"""
    home = os.path.expanduser("~")
    if home and home != "~" and (path == home or path.startswith(home + os.sep)):
        return "~" + path[len(home) :]
    return path


def url_basename(url: str) -> str:
    """获取 URL 路径的最后一段"""
    # 只取路径部分，查询字符串和片段不计入文件名
    return posixpath.basename(urlsplit(url).path)
