"""
Errors Module - 检查过程中的错误类型

FileOpenError 和 ScanError 会交给调用方处理（跳过文件或中止整个运行），
LineTooLongError 只在规则内部使用。
"""
from typing import Optional


class LintError(Exception):
    """lllcheck 错误基类"""

    reason = "can't check file"

    def __init__(self, file_path: str, cause: Optional[BaseException] = None):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"{self.reason} {file_path}: {cause}")


class FileOpenError(LintError):
    """文件无法打开（不存在、无权限等）"""

    reason = "can't open file"


class ScanError(LintError):
    """读取文件过程中失败"""

    reason = "can't scan file"


class ConfigError(LintError):
    """配置文件无效或配置值越界"""

    reason = "invalid config"


class LineTooLongError(Exception):
    """物理行超过行缓冲上限"""

    def __init__(self, line_number: int, max_size: int):
        self.line_number = line_number
        self.max_size = max_size
        super().__init__(f"line {line_number} is longer than {max_size} characters")
