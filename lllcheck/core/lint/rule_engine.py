"""
Rule Engine Module - 规则引擎

宿主工具的接入点：给定配置和文件列表，返回所有 Issue。

支持:
- 出错即中止，或跳过出错文件继续检查
- 多文件并行检查（结果顺序与串行一致）
"""
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .config import CheckConfig
from .errors import LintError
from .reporter import Issue
from .rules import BaseRule, get_all_rules
from ...lib.logger import get_logger


class RuleEngine:
    """规则引擎 - 管理和执行规则"""

    def __init__(self, config: Optional[CheckConfig] = None, keep_going: bool = False,
                 parallel: bool = False, max_workers: int = 0):
        """
        Args:
            config: 检查配置，不传则使用默认值
            keep_going: 文件检查失败时是否跳过继续（False 表示直接抛出）
            parallel: 是否启用并行执行
            max_workers: 最大工作线程数（0 表示自动：min(32, cpu_count * 2)）
        """
        self.config = (config or CheckConfig()).validate()
        self.keep_going = keep_going
        self.parallel = parallel
        self.max_workers = max_workers
        self.rules: List[BaseRule] = [rule_class(self.config) for rule_class in get_all_rules()]
        self.failed_files: Dict[str, LintError] = {}
        self.logger = get_logger("lllcheck")
        self.logger.debug(f"RuleEngine initialized: config={self.config}, keep_going={keep_going}, "
                          f"parallel={parallel}")

    def check_file(self, file_path: str) -> List[Issue]:
        """
        对单个文件执行所有规则检查

        Raises:
            LintError: 文件无法打开或读取失败
        """
        issues = []
        for rule in self.rules:
            issues.extend(rule.check(file_path))
        return issues

    def check_files(self, files: Sequence[Union[str, Path]]) -> List[Issue]:
        """
        对多个文件执行检查

        Args:
            files: 文件路径列表
        Returns:
            所有 Issue，按文件输入顺序、文件内按行号排列
        Raises:
            LintError: keep_going=False 时，第一个失败文件的错误
        """
        files = [str(f) for f in files]
        self.failed_files = {}
        self.logger.info(f"Checking {len(files)} files with {len(self.rules)} rules (parallel={self.parallel})")

        with self.logger.timed("check_files"):
            if not self.parallel or len(files) <= 1:
                outcomes = self._check_files_sequential(files)
            else:
                outcomes = self._check_files_parallel(files)
            issues = self._collect(files, outcomes)

        self.logger.info(f"Total issues found: {len(issues)} (failed files: {len(self.failed_files)})")
        return issues

    def _check_files_sequential(self, files: List[str]) -> Dict[int, Union[List[Issue], LintError]]:
        """串行检查文件，遇到错误且不继续时立即停止"""
        outcomes: Dict[int, Union[List[Issue], LintError]] = {}
        for index, file_path in enumerate(files):
            try:
                outcomes[index] = self.check_file(file_path)
            except LintError as e:
                outcomes[index] = e
                if not self.keep_going:
                    break
        return outcomes

    def _check_files_parallel(self, files: List[str]) -> Dict[int, Union[List[Issue], LintError]]:
        """并行检查文件"""
        outcomes: Dict[int, Union[List[Issue], LintError]] = {}

        def check_single_file(index: int) -> Tuple[int, List[Issue]]:
            return index, self.check_file(files[index])

        workers = self.max_workers
        if workers <= 0:
            workers = min(32, (os.cpu_count() or 1) * 2)
        workers = min(workers, len(files))

        self.logger.debug(f"Starting parallel check with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(check_single_file, i): i for i in range(len(files))}
            for future in as_completed(futures):
                index = futures[future]
                try:
                    _, issues = future.result()
                    outcomes[index] = issues
                except LintError as e:
                    outcomes[index] = e

        return outcomes

    def _collect(self, files: List[str], outcomes: Dict[int, Union[List[Issue], LintError]]) -> List[Issue]:
        """按输入顺序合并结果，处理失败文件"""
        all_issues: List[Issue] = []
        for index, file_path in enumerate(files):
            if index not in outcomes:
                break
            outcome = outcomes[index]
            if isinstance(outcome, LintError):
                if not self.keep_going:
                    raise outcome
                self.logger.warning(f"Skipping {file_path}: {outcome}")
                self.failed_files[file_path] = outcome
                continue

            all_issues.extend(outcome)
            self.logger.debug(f"File {index + 1}/{len(files)} ({Path(file_path).name}): "
                              f"{len(outcome)} issues, {len(all_issues)} accumulated")
            for issue in outcome:
                self.logger.debug(f"  {issue.to_text()}")
        return all_issues


def check(config: Optional[CheckConfig], file_paths: Sequence[Union[str, Path]]) -> List[Issue]:
    """
    检查一组文件

    任何一个文件失败都会抛出对应的 LintError，不返回部分结果。

    Args:
        config: 检查配置，None 表示使用默认值
        file_paths: 文件路径列表
    Returns:
        所有 Issue
    Raises:
        FileOpenError: 文件无法打开
        ScanError: 读取过程中失败
    """
    return RuleEngine(config).check_files(file_paths)
