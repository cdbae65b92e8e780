"""
ConfigService - 配置管理服务

负责集中化管理牌组相关配置，包括：
- 牌组创建配置(随机种子、是否创建即洗牌)
- 日志配置

为Application层提供统一的配置管理接口.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .types import CommandResult, QueryResult

LOG_LEVEL_ENV = "TABLETOP_DECK_LOG_LEVEL"


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@dataclass
class DeckConfig:
    """牌组创建配置"""
    seed: Optional[int] = None
    shuffle_on_create: bool = False

    def __post_init__(self):
        """验证随机种子"""
        if self.seed is None:
            return
        if not isinstance(self.seed, int) or isinstance(self.seed, bool):
            raise ValueError(f"随机种子必须是整数，当前为: {self.seed!r}")
        if self.seed < 0:
            raise ValueError(f"随机种子不能为负数，当前为: {self.seed}")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%H:%M:%S'


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按日志配置初始化根日志器.

    未知的日志级别名退回到INFO.

    Args:
        config: 日志配置，为None时使用默认配置
    """
    config = config or LoggingConfig(log_level=os.getenv(LOG_LEVEL_ENV, 'INFO').upper())
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=config.log_format,
        datefmt=config.date_format,
    )


_DEFAULT_CONFIGS = {
    ConfigType.DECK: DeckConfig,
    ConfigType.LOGGING: LoggingConfig,
}


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'shuffled': DeckConfig(shuffle_on_create=True),
            'deterministic': DeckConfig(seed=42, shuffle_on_create=True),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(
                log_level=os.getenv(LOG_LEVEL_ENV, 'INFO').upper()
            ),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }

        self.logger.info("默认配置加载完成")

    def _get(self, config_type: ConfigType, profile: str) -> Any:
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组配置

        Args:
            profile: 配置文件名 (default, shuffled, deterministic)

        Returns:
            查询结果，包含牌组配置
        """
        return QueryResult.success_result(self._get(ConfigType.DECK, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get(ConfigType.LOGGING, profile))

    def list_profiles(self, config_type: Union[ConfigType, str]) -> QueryResult[List[str]]:
        """
        列出某类配置的所有配置文件名

        Args:
            config_type: 配置类型，或其字符串值 ("deck", "logging")

        Returns:
            查询结果，包含排序后的配置文件名；未知类型返回失败结果
        """
        try:
            config_type = ConfigType(config_type)
        except ValueError:
            return QueryResult.failure_result(
                f"不支持的配置类型: {config_type}",
                error_code="UNSUPPORTED_CONFIG_TYPE"
            )
        return QueryResult.success_result(sorted(self._configs[config_type]))

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> CommandResult:
        """
        更新配置

        更新后的配置会重新经过校验，校验失败时原配置保持不变.

        Args:
            config_type: 配置类型
            profile: 配置文件名
            updates: 更新的配置项

        Returns:
            命令结果，表示更新是否成功
        """
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return CommandResult.failure_result(
                f"配置文件 {profile} 不存在",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )

        current_config = config_profiles[profile]
        known = {f.name for f in fields(_DEFAULT_CONFIGS[config_type])}
        unknown = sorted(set(updates) - known)
        if unknown:
            return CommandResult.validation_error(
                f"配置项 {', '.join(unknown)} 不存在于 {config_type.value}.{profile} 中",
                error_code="CONFIG_KEY_NOT_FOUND"
            )

        try:
            config_profiles[profile] = replace(current_config, **updates)
        except ValueError as e:
            return CommandResult.validation_error(str(e), error_code="CONFIG_VALIDATION_FAILED")

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return CommandResult.success_result(f"配置 {config_type.value}.{profile} 已更新")
