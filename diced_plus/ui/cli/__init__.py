"""命令行界面模块."""

from .cli import DicedCLI, create_parser, main
from .render import CLIRenderer

__all__ = ['CLIRenderer', 'DicedCLI', 'create_parser', 'main']
