"""Configuration modules for citytraffic."""

from .engine import EngineConfig
from .settings import Settings, get_settings

__all__ = [
    'EngineConfig',
    'Settings',
    'get_settings'
]
