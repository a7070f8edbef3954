"""
Reporter Module - Issue 记录
"""
from dataclasses import dataclass, asdict


# 行长度检查的来源标识
ISSUE_SOURCE = "LLL"


@dataclass(frozen=True)
class Issue:
    """
    单条违规记录

    创建后不可修改，直接交给调用方。

    Attributes:
        file_path: 文件路径（与调用方传入的一致）
        line: 行号（从 1 开始）
        column: 列号（0 表示未设置）
        message: 用户可读描述
        source: 检查来源标识
    """
    file_path: str
    line: int
    message: str
    column: int = 0
    source: str = ISSUE_SOURCE

    def to_text(self) -> str:
        """
        转换为编译器风格的单行文本
        格式: path/to/file.go:line:column: message [LLL]
        """
        return f"{self.file_path}:{self.line}:{self.column}: {self.message} [{self.source}]"

    def to_dict(self) -> dict:
        """唯一序列化入口"""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> 'Issue':
        """
        唯一反序列化入口

        Args:
            d: 字典数据，文件路径支持 file_path 和 file 两种键
        """
        return cls(
            file_path=d.get("file_path") or d.get("file", ""),
            line=d.get("line", 0),
            column=d.get("column", 0),
            message=d.get("message", ""),
            source=d.get("source", ISSUE_SOURCE),
        )

    def __str__(self):
        return self.to_text()
