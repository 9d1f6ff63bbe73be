"""命令行渲染模块.

这个模块负责把抽牌和掷骰结果渲染为命令行文本，
实现显示逻辑与核心逻辑的分离。
"""

from typing import Iterable, List

from colorama import Fore, Style

from diced_plus.application.types import RollOptions
from diced_plus.core.dice import RollResult, is_crit_failure, is_crit_success


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def render_cards(cards: Iterable[str]) -> str:
        """每张牌一行."""
        return "\n".join(cards)

    @staticmethod
    def render_roll(result: RollResult, options: RollOptions) -> str:
        """渲染一组骰子的掷骰结果.

        Args:
            result: 掷骰结果
            options: 输出选项

        Returns:
            两行文本：骰子记法标题和掷骰结果，如 "2d6:" 和 "=> (3, 5): [8]"
        """
        values = ", ".join(
            CLIRenderer._format_value(value, result.die.size, options.crit)
            for value in result.values
        )
        line = f"=> ({values})"
        if options.sum:
            line += f": [{result.total}]"
        elif options.count:
            line += (f": [crit successes: {result.successes}, "
                     f"crit failures: {result.failures}]")
        return f"{result.die.notation}:\n{line}"

    @staticmethod
    def render_rolls(results: Iterable[RollResult], options: RollOptions) -> str:
        lines: List[str] = [CLIRenderer.render_roll(result, options) for result in results]
        return "\n".join(lines)

    @staticmethod
    def render_error(prefix: str, message: str) -> str:
        return f"{prefix} {message}"

    @staticmethod
    def _format_value(value: int, size: int, crit: bool) -> str:
        text = str(value)
        if not crit:
            return text
        if is_crit_failure(value):
            return f"{Style.BRIGHT}{Fore.RED}{text}{Style.RESET_ALL}"
        if is_crit_success(value, size):
            return f"{Style.BRIGHT}{Fore.BLUE}{text}{Style.RESET_ALL}"
        return text
