"""
Framework Support Classes
"""

from sanicview.support.config import Config
from sanicview.support.events import EventDispatcher, dispatcher

__all__ = [
    'Config',
    'EventDispatcher',
    'dispatcher',
]
