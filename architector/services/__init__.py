"""
Services package.
"""

from .architecture_svc import ArchitectureService
from .config_svc import ConfigService

__all__ = [
    "ArchitectureService",
    "ConfigService",
]
