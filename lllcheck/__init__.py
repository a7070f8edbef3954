"""
lllcheck - 行长度检查（LLL）

对外只暴露检查入口、配置和 Issue 记录，宿主工具负责文件发现和结果汇总。
"""
from .core.lint.config import CheckConfig, ConfigLoader
from .core.lint.errors import LintError, FileOpenError, ScanError, ConfigError
from .core.lint.reporter import Issue, ISSUE_SOURCE
from .core.lint.rule_engine import RuleEngine, check

__version__ = "0.1.0"

__all__ = [
    'CheckConfig',
    'ConfigLoader',
    'LintError',
    'FileOpenError',
    'ScanError',
    'ConfigError',
    'Issue',
    'ISSUE_SOURCE',
    'RuleEngine',
    'check',
]
