"""
Configuration Module - 配置文件解析和管理

只识别两个配置项：line_length（默认 120）和 tab_width（默认 1）。
"""
import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

from .errors import ConfigError
from ...lib.logger import get_logger


DEFAULT_LINE_LENGTH = 120
DEFAULT_TAB_WIDTH = 1

# 配置文件默认查找位置（按优先级）
DEFAULT_CONFIG_PATHS = [
    ".lllcheck/config.yaml",
    ".lllcheck.yaml",
    ".lllcheck.yml",
    "lllcheck.yaml",
]

# 同时接受连字符写法
KEY_ALIASES = {
    "line_length": "line_length",
    "line-length": "line_length",
    "tab_width": "tab_width",
    "tab-width": "tab_width",
}

SECTION_NAME = "lll"


@dataclass(frozen=True)
class CheckConfig:
    """单次检查的配置"""
    line_length: int = DEFAULT_LINE_LENGTH
    tab_width: int = DEFAULT_TAB_WIDTH

    @property
    def tab_spaces(self) -> str:
        """替换制表符用的空格串"""
        return " " * self.tab_width

    def validate(self, source: str = "<config>") -> 'CheckConfig':
        """
        校验取值范围，返回自身方便链式调用

        Args:
            source: 配置来源（配置文件路径），用于错误信息
        """
        for key in ("line_length", "tab_width"):
            value = getattr(self, key)
            # bool 是 int 的子类，这里要排除
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(source, ValueError(f"{key} must be an integer, got {value!r}"))
        if self.line_length <= 0:
            raise ConfigError(source, ValueError(f"line_length must be > 0, got {self.line_length}"))
        if self.tab_width < 0:
            raise ConfigError(source, ValueError(f"tab_width must be >= 0, got {self.tab_width}"))
        return self


def find_config_file(project_root: Union[str, Path]) -> Optional[Path]:
    """在项目根目录下查找配置文件"""
    root = Path(project_root)
    for rel_path in DEFAULT_CONFIG_PATHS:
        path = root / rel_path
        if path.is_file():
            return path
    return None


class ConfigLoader:
    """配置加载器"""

    DEFAULT_CONFIG = {
        "line_length": DEFAULT_LINE_LENGTH,
        "tab_width": DEFAULT_TAB_WIDTH,
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self.logger = get_logger("lllcheck")

    def load(self) -> CheckConfig:
        """加载配置文件，文件不存在时使用默认值"""
        self.logger.debug(f"Loading config from: {self.config_path}")

        self._config = copy.deepcopy(self.DEFAULT_CONFIG)
        source = "<config>"

        if self.config_path and self.config_path.exists():
            source = str(self.config_path)
            user_config = self._read_yaml(self.config_path)
            self._merge_config(self._config, user_config)
            self.logger.debug(f"Merged user config: {self._config}")
        else:
            self.logger.debug("No config file found, using defaults only")

        config = CheckConfig(
            line_length=self._config["line_length"],
            tab_width=self._config["tab_width"],
        ).validate(source)
        self.logger.debug(f"Config built: line_length={config.line_length}, tab_width={config.tab_width}")
        return config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(str(path), e) from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), ValueError("top level must be a mapping"))

        # 支持把配置放在 lll: 段下
        section = data.get(SECTION_NAME)
        if isinstance(section, dict):
            data = section
        return data

    def _merge_config(self, base: Dict, override: Dict):
        """合并用户配置（只接受已知键）"""
        for key, value in override.items():
            name = KEY_ALIASES.get(key)
            if name is None:
                self.logger.debug(f"Ignoring unknown config key: {key}")
                continue
            base[name] = value

    def get_raw_config(self) -> Dict[str, Any]:
        """获取合并后的原始配置字典"""
        return self._config
