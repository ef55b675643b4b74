"""Configuration module for fnkit.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru sinks and enable fnkit's log records

Usage:
------
```python
from fnkit.config import settings
strict = settings.sequencing.strict_settlement

from fnkit.config import get_logger
logger = get_logger(__name__)
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
