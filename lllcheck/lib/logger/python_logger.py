"""
lllcheck Logger

默认不写文件也不输出，只挂 NullHandler，日志去向交给宿主的 logging 配置：
- $LLLCHECK_LOG_DIR: 额外写到该目录下的 <name>_<session>.log
- $LLLCHECK_VERBOSE: 额外输出到 stderr
"""
import logging
import os
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

ENV_VERBOSE = "LLLCHECK_VERBOSE"
ENV_LOG_DIR = "LLLCHECK_LOG_DIR"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LLLCheckLogger:
    """lllcheck 日志记录器（按名称单例）"""

    _instances: dict = {}
    _session_id: Optional[str] = None

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"lllcheck.{name}")
        self.logger.setLevel(logging.DEBUG)
        self.log_file: Optional[str] = None

        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

        log_dir = os.environ.get(ENV_LOG_DIR)
        if log_dir:
            handler = self._open_log_file(Path(log_dir))
            if handler is not None:
                handler.setFormatter(formatter)
                self.logger.addHandler(handler)

        if os.environ.get(ENV_VERBOSE):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def _open_log_file(self, log_dir: Path) -> Optional[logging.Handler]:
        """打开会话日志文件，目录不可写时返回 None（检查本身不受影响）"""
        if LLLCheckLogger._session_id is None:
            LLLCheckLogger._session_id = datetime.now().strftime("%Y%m%d_%H%M%S")

        log_file = log_dir / f"{self.name}_{LLLCheckLogger._session_id}.log"
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            print(f"Warning: can't write log file {log_file}: {e}", file=sys.stderr)
            return None

        self.log_file = str(log_file)
        return handler

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    @contextmanager
    def timed(self, step: str):
        """记录代码块耗时，异常原样抛出"""
        start = time.perf_counter()
        self.debug(f"[{step}] Started")
        try:
            yield
        except Exception as e:
            self.warning(f"[{step}] Failed after {time.perf_counter() - start:.2f}s: {e}")
            raise
        self.debug(f"[{step}] Completed in {time.perf_counter() - start:.2f}s")


def get_logger(name: str) -> LLLCheckLogger:
    """获取日志记录器（单例模式）"""
    if name not in LLLCheckLogger._instances:
        LLLCheckLogger._instances[name] = LLLCheckLogger(name)
    return LLLCheckLogger._instances[name]


def reset_session():
    """关闭已有 handler，下次 get_logger 时按当前环境变量重新配置"""
    for instance in LLLCheckLogger._instances.values():
        for handler in list(instance.logger.handlers):
            handler.close()
            instance.logger.removeHandler(handler)
    LLLCheckLogger._session_id = None
    LLLCheckLogger._instances.clear()
