"""Configuration adapters."""

from seb_kiosk.adapters.config.app_config import AppConfig
from seb_kiosk.adapters.config.policy_loader import PolicyLoader

__all__ = ["AppConfig", "PolicyLoader"]
