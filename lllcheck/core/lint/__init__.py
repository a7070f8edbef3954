"""lllcheck Lint 模块

主要组件:
- LineLengthRule: 行长度检查
- RuleEngine / check: 宿主工具的接入点
- ConfigLoader / CheckConfig: 配置
"""
