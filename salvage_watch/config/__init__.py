"""Configuration package exports."""

from .loader import ConfigLocator, load_settings
from .models import CherryPickedConfig, LKQConfig, MailConfig, Settings

__all__ = [
    "CherryPickedConfig",
    "ConfigLocator",
    "LKQConfig",
    "MailConfig",
    "Settings",
    "load_settings",
]
