"""
Application Layer Types - 应用层类型定义

定义应用服务层使用的命令结果和查询结果，以及牌组异常到结果的转换.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar
from enum import Enum, auto

from ..core.exceptions import DeckError

T = TypeVar('T')


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()
    BUSINESS_RULE_VIOLATION = auto()


@dataclass(frozen=True)
class CommandResult:
    """命令执行结果"""
    success: bool
    status: ResultStatus
    message: str = ""
    error_code: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, message: str = "操作成功", data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """创建成功结果"""
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            message=message,
            data=data
        )

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None,
                       status: ResultStatus = ResultStatus.FAILURE,
                       data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """创建失败结果"""
        return cls(
            success=False,
            status=status,
            message=message,
            error_code=error_code,
            data=data
        )

    @classmethod
    def validation_error(cls, message: str, error_code: Optional[str] = None) -> 'CommandResult':
        """创建验证错误结果"""
        return cls.failure_result(message, error_code, ResultStatus.VALIDATION_ERROR)

    @classmethod
    def business_rule_violation(cls, message: str, error_code: Optional[str] = None,
                                data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """创建业务规则违反结果"""
        return cls.failure_result(message, error_code, ResultStatus.BUSINESS_RULE_VIOLATION, data)

    @classmethod
    def from_deck_error(cls, error: DeckError,
                        data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """
        把牌组领域异常转换为失败结果

        error_code取DeckErrorKind的名称(EMPTY_REMOVAL、UNEVEN_SPLIT).

        Args:
            error: 牌组异常
            data: 附带的部分结果，如已发出的张数

        Returns:
            业务规则违反的命令结果
        """
        return cls.business_rule_violation(error.message, error.kind.name, data)


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "查询成功") -> 'QueryResult[T]':
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
