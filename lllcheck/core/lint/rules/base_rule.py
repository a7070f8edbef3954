"""
Base Rule - 规则基类
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..config import CheckConfig
from ..reporter import Issue


class BaseRule(ABC):
    """
    规则基类

    规则实例不持有任何跨文件状态，同一个实例可以在多个线程里同时检查不同文件。
    """

    # 子类必须定义的属性
    identifier: str = ""       # 规则唯一标识符，同时作为 Issue.source
    name: str = ""             # 规则名称
    description: str = ""      # 规则描述

    def __init__(self, config: Optional[CheckConfig] = None):
        """
        Args:
            config: 检查配置，不传则使用默认值
        """
        self.config = (config or CheckConfig()).validate()

    @abstractmethod
    def check(self, file_path: str) -> List[Issue]:
        """
        执行规则检查

        Args:
            file_path: 文件路径
        Returns:
            违规列表，按行号升序
        Raises:
            FileOpenError: 文件无法打开
            ScanError: 读取过程中失败
        """

    def create_issue(self, file_path: str, line: int, message: str, column: int = 0) -> Issue:
        """
        创建违规记录

        Args:
            file_path: 文件路径
            line: 行号（从 1 开始）
            message: 违规消息
            column: 列号（0 表示未设置）
        """
        return Issue(
            file_path=file_path,
            line=line,
            column=column,
            message=message,
            source=self.identifier,
        )

    def __repr__(self):
        return f"<{self.__class__.__name__} identifier={self.identifier} config={self.config}>"
