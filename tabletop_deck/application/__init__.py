"""
Application Layer - 应用服务层

在核心牌组之上提供配置管理与牌组服务.
服务以CommandResult/QueryResult返回结果，不向上抛出领域异常.
"""

from .types import CommandResult, QueryResult, ResultStatus
from .config_service import (
    ConfigService,
    ConfigType,
    DeckConfig,
    LoggingConfig,
    configure_logging,
)
from .deck_service import DeckService

__all__ = [
    'CommandResult',
    'QueryResult',
    'ResultStatus',
    'ConfigService',
    'ConfigType',
    'DeckConfig',
    'LoggingConfig',
    'configure_logging',
    'DeckService',
]
