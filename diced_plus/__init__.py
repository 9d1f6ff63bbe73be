"""
diced-plus: 抽牌与掷骰命令行工具.
"""

__version__ = "0.1.0"
