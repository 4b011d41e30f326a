import logging
import os
from dataclasses import dataclass, asdict
from typing import Optional

logger = logging.getLogger(__name__)

_FALSE_VALUES = {'0', 'false', 'no', 'off'}


@dataclass
class Settings:
    """runtime configuration for the whole library"""
    checked: bool = True  # raise on precondition violations
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls) -> 'Settings':
        """build settings from SEQCUR_* environment variables"""
        checked = os.environ.get('SEQCUR_CHECKED', '1').strip().lower() not in _FALSE_VALUES
        log_level = os.environ.get('SEQCUR_LOG_LEVEL', cls.log_level).strip().upper()
        return cls(checked=checked, log_level=log_level)


def _apply_log_level(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: '{level_name}'")
    logging.getLogger('seqcur').setLevel(level)


settings = Settings.from_env()
try:
    _apply_log_level(settings.log_level)
except ValueError:
    logger.warning(f"ignoring SEQCUR_LOG_LEVEL={settings.log_level!r}")
    settings.log_level = 'WARNING'


def configure(checked: Optional[bool] = None, log_level: Optional[str] = None) -> Settings:
    """
    update the global settings in place and return them.
    arguments left as none keep their current value.
    """
    if log_level is not None:
        _apply_log_level(log_level)
        settings.log_level = log_level.upper()
    if checked is not None:
        settings.checked = bool(checked)
    logger.debug(f"settings: {asdict(settings)}")
    return settings
