"""
Line Length Rule - 行长度检查

制表符按字面替换为 tab_width 个空格（不按制表位对齐），长度按 Unicode 码点计算。
"""
from typing import IO, Iterator, List

from ..errors import FileOpenError, ScanError, LineTooLongError
from ..reporter import Issue
from .base_rule import BaseRule


# 单个物理行的缓冲上限（字符数，不含换行符）
MAX_SCAN_TOKEN_SIZE = 64 * 1024


def iter_lines(f: IO[str], max_size: int = MAX_SCAN_TOKEN_SIZE) -> Iterator[str]:
    """
    逐行读取，去掉行尾的 \\n 和一个 \\r

    只有 \\n 作为行结束符，文件需要以 newline="\\n" 打开。

    Args:
        f: 文本文件对象
        max_size: 单行最大字符数
    Yields:
        去掉换行符的行内容
    Raises:
        LineTooLongError: 某一行超过 max_size，之后无法继续读取
    """
    line_number = 0
    while True:
        # 多读两个字符，刚好容纳 max_size 长的内容加 \r\n
        chunk = f.readline(max_size + 2)
        if not chunk:
            return
        line_number += 1

        if chunk.endswith("\n"):
            chunk = chunk[:-1]
        if chunk.endswith("\r"):
            chunk = chunk[:-1]

        if len(chunk) > max_size:
            raise LineTooLongError(line_number, max_size)
        yield chunk


class LineLengthRule(BaseRule):
    """行长度检查"""

    identifier = "LLL"
    name = "Line Length Check"
    description = "Reports long lines"

    max_line_size = MAX_SCAN_TOKEN_SIZE

    def check(self, file_path: str) -> List[Issue]:
        issues = []

        max_length = self.config.line_length
        tab_spaces = self.config.tab_spaces

        try:
            f = open(file_path, 'r', encoding='utf-8', errors='replace', newline='\n')
        except IsADirectoryError as e:
            # 目录按读取失败处理
            raise ScanError(file_path, e) from e
        except OSError as e:
            raise FileOpenError(file_path, e) from e

        with f:
            try:
                for line_num, line in enumerate(iter_lines(f, self.max_line_size), 1):
                    line_len = len(line.replace("\t", tab_spaces))
                    if line_len > max_length:
                        issues.append(self.create_issue(
                            file_path=file_path,
                            line=line_num,
                            message=f"line is {line_len} characters",
                        ))
            except LineTooLongError as e:
                # 上限小于缓冲时超长行按违规上报并停止扫描，否则按读取失败处理
                if max_length >= self.max_line_size:
                    raise ScanError(file_path, e) from e
                issues.append(self.create_issue(
                    file_path=file_path,
                    line=e.line_number,
                    column=1,
                    message=f"line is more than {self.max_line_size} characters",
                ))
            except OSError as e:
                raise ScanError(file_path, e) from e

        return issues
