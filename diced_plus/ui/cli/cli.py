"""diced-plus 命令行界面.

这个模块解析命令行参数，调用应用层服务抽牌或掷骰，
并决定错误提示文案和进程退出码。
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from diced_plus import __version__
from diced_plus.application import (
    ConfigService,
    DeckShape,
    DrawRequest,
    DrawService,
    RollOptions,
    RollService,
)
from diced_plus.ui.cli.render import CLIRenderer


def non_negative_int(text: str) -> int:
    """argparse类型：非负整数."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"不是整数: {text}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"数量不能为负数: {text}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """创建参数解析器."""
    parser = argparse.ArgumentParser(
        prog="diced-plus",
        description="Diced: a dice roller/card drawer with no bugs, only features!",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="显示调试日志",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="随机数种子，用于复现结果",
    )
    parser.add_argument(
        "--cli-profile",
        default="default",
        help="命令行配置档 (default, strict)",
    )
    parser.add_argument(
        "--draw-profile",
        default="default",
        help="抽牌配置档 (default, nondestructive)",
    )
    parser.add_argument(
        "--log-profile",
        default="default",
        help="日志配置档 (default, debug, quiet)，--verbose 时固定为 debug",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # draw 命令
    draw_parser = subparsers.add_parser("draw", help="Draw a card from a deck.")
    deck_parsers = draw_parser.add_subparsers(dest="deck", required=True)

    traditional = deck_parsers.add_parser(
        "traditional", help="A traditional deck of playing cards."
    )
    traditional.add_argument(
        "amount", nargs="?", type=non_negative_int, default=None,
        help="Draw [AMOUNT] number of cards from the deck.",
    )
    traditional.add_argument(
        "--no-jokers", action="store_true", help="Use a deck without jokers."
    )
    traditional.add_argument(
        "--nondestructive", action="store_true", help="Draw nondestructively"
    )

    tarot = deck_parsers.add_parser(
        "tarot", help="A 78-card tarot deck, optionally including the minor arcana."
    )
    tarot.add_argument(
        "amount", nargs="?", type=non_negative_int, default=None,
        help="Draw [AMOUNT] number of cards from the deck.",
    )
    tarot.add_argument(
        "--include-minor", action="store_true", help="Include the minor arcana."
    )
    tarot.add_argument(
        "--nondestructive", action="store_true", help="Draw nondestructively"
    )

    # roll 命令
    roll_parser = subparsers.add_parser("roll", help="Roll a die.")
    roll_parser.add_argument("dice", nargs="*", help="The dice to roll.")
    roll_parser.add_argument(
        "--crit", action="store_true", help="Color critical successes and fails"
    )
    roll_parser.add_argument(
        "--count", action="store_true", help="Count the number of successes and fails."
    )
    roll_parser.add_argument(
        "--sum", action="store_true", help="Add up all of the rolls."
    )

    return parser


def setup_logging(config_service: ConfigService, verbose: bool = False,
                  profile: str = "default") -> None:
    """
    按配置档设置日志.

    Args:
        config_service: 配置服务
        verbose: 为True时忽略profile，使用debug配置档
        profile: 日志配置档名
    """
    if verbose:
        profile = "debug"
    config = config_service.get_logging_config(profile).data
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
    )


class DicedCLI:
    """命令行应用.

    每次调用只构建一次牌组或掷一次骰，结束后不保留任何状态。
    """

    def __init__(self, config_service: Optional[ConfigService] = None,
                 rng: Optional[random.Random] = None,
                 cli_profile: str = "default",
                 draw_profile: str = "default"):
        self.config_service = config_service or ConfigService()
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(__name__)
        self.cli_config = self.config_service.get_cli_config(cli_profile).data
        self.draw_config = self.config_service.get_draw_config(draw_profile).data

    def run(self, args: argparse.Namespace) -> int:
        """执行已解析的命令，返回退出码."""
        if args.command == "draw":
            return self.run_draw(args)
        return self.run_roll(args)

    def run_draw(self, args: argparse.Namespace) -> int:
        if args.deck == "traditional":
            shape = DeckShape.traditional(with_jokers=not args.no_jokers)
        else:
            shape = DeckShape.tarot(include_minor=args.include_minor)

        amount = self.draw_config.default_amount if args.amount is None else args.amount
        destructive = self.draw_config.default_destructive and not args.nondestructive
        request = DrawRequest(amount=amount, destructive=destructive)

        result = DrawService(self.rng).draw(shape, request)
        if not result.success:
            print(CLIRenderer.render_error(self.cli_config.card_error_prefix, result.message),
                  file=sys.stderr)
            return self.cli_config.insufficient_cards_exit_code

        # 抽0张时不输出空行
        if result.data:
            print(CLIRenderer.render_cards(result.data))
        return 0

    def run_roll(self, args: argparse.Namespace) -> int:
        dice_config = self.config_service.get_dice_config().data
        result = RollService(self.rng, dice_config).roll(args.dice)
        if not result.success:
            print(CLIRenderer.render_error(self.cli_config.dice_error_prefix, result.message),
                  file=sys.stderr)
            return self.cli_config.dice_error_exit_code

        options = RollOptions(crit=args.crit, count=args.count, sum=args.sum)
        print(CLIRenderer.render_rolls(result.data, options))
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口."""
    just_fix_windows_console()
    parser = create_parser()
    args = parser.parse_args(argv)

    config_service = ConfigService()
    setup_logging(config_service, args.verbose, args.log_profile)

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    cli = DicedCLI(config_service, rng,
                   cli_profile=args.cli_profile,
                   draw_profile=args.draw_profile)
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
