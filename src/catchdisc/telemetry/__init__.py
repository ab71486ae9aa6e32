#
# src/catchdisc/telemetry/__init__.py
#
"""
Logging setup for catchdisc.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]
