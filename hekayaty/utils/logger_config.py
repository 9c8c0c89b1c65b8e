"""
日志配置模块
统一的 stderr 输出 + 可选的轮转日志文件
"""
import os
import sys
from loguru import logger

from hekayaty.config.settings import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[function]} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = None, log_file: str = None) -> None:
    """
    初始化 loguru 输出

    Args:
        level: 日志级别，默认读取 LOG_LEVEL
        log_file: 日志文件路径，默认读取 logging.file（为空时只输出到 stderr）
    """
    level = level or settings.LOG_LEVEL
    log_file = log_file if log_file is not None else settings.LOG_FILE

    logger.remove()
    logger.configure(extra={"function": "-"})
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",  # 日志文件达到 10MB 时轮转
            retention="7 days",  # 保留 7 天
            compression="zip",  # 压缩旧日志
            format=LOG_FORMAT,
            level=level,
        )
