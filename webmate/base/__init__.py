"""
Base infrastructure components shared by all webmate API clients.
"""

from .logger import Logger

__all__ = [
    'Logger',
]
