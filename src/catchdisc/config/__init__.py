#
# config/__init__.py
#
"""
Configuration handling sub-package for catchdisc.
"""

from .loader import load_settings, read_settings_table, settings_from_mapping
from .models import DiscoverySettings

__all__ = [
    "DiscoverySettings",
    "load_settings",
    "read_settings_table",
    "settings_from_mapping",
]

# 🔼⚙️
