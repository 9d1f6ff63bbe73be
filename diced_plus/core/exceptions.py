"""
抽牌与掷骰业务异常定义
核心层只抛出异常，由最外层调用者决定提示文案和退出码
"""


class DicedError(Exception):
    """diced-plus 基础异常类"""
    pass


class InsufficientCardsError(DicedError):
    """牌组剩余牌数不足异常

    Attributes:
        requested: 请求抽取的牌数
        available: 牌组当前剩余的牌数
    """

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"{requested} cards requested, deck only has {available} cards."
        )


class DiceNotationError(DicedError):
    """骰子记法错误异常"""

    def __init__(self, message: str, notation: str = ""):
        self.notation = notation
        super().__init__(message)


class InvalidDieError(DicedError):
    """骰子面数无效异常"""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Improper Die Size {size}")
