"""
Application Layer Types - 应用层类型定义

定义应用服务层使用的基础类型，包括查询结果、牌组形状和抽牌请求等。
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()
    BUSINESS_RULE_VIOLATION = auto()


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "") -> 'QueryResult[T]':
        """创建成功结果"""
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            data=data,
            message=message
        )

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None,
                       status: ResultStatus = ResultStatus.FAILURE) -> 'QueryResult[T]':
        """创建失败结果"""
        return cls(
            success=False,
            status=status,
            message=message,
            error_code=error_code
        )

    @classmethod
    def validation_error(cls, message: str, error_code: Optional[str] = None) -> 'QueryResult[T]':
        """创建验证错误结果"""
        return cls.failure_result(message, error_code, ResultStatus.VALIDATION_ERROR)

    @classmethod
    def business_rule_violation(cls, message: str, error_code: Optional[str] = None) -> 'QueryResult[T]':
        """创建业务规则违反结果"""
        return cls.failure_result(message, error_code, ResultStatus.BUSINESS_RULE_VIOLATION)


class DeckKind(Enum):
    """牌组种类"""
    TRADITIONAL = "traditional"
    TAROT = "tarot"


@dataclass(frozen=True)
class DeckShape:
    """
    牌组形状选择.

    with_jokers 只对扑克牌组有效，include_minor 只对塔罗牌组有效.
    """
    kind: DeckKind
    with_jokers: bool = True
    include_minor: bool = False

    @classmethod
    def traditional(cls, with_jokers: bool = True) -> 'DeckShape':
        return cls(DeckKind.TRADITIONAL, with_jokers=with_jokers)

    @classmethod
    def tarot(cls, include_minor: bool = False) -> 'DeckShape':
        return cls(DeckKind.TAROT, include_minor=include_minor)


@dataclass(frozen=True)
class DrawRequest:
    """抽牌请求"""
    amount: int = 1
    destructive: bool = True

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"抽牌数量不能为负数: {self.amount}")


@dataclass(frozen=True)
class RollOptions:
    """掷骰输出选项"""
    crit: bool = False
    count: bool = False
    sum: bool = False
