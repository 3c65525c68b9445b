"""
Print Broker Spoolers
=====================

OS print spooler backends.
"""

import sys

from .base import BaseSpooler
from .cups import CupsSpooler
from .windows import WindowsSpooler

__all__ = ['BaseSpooler', 'CupsSpooler', 'WindowsSpooler', 'get_spooler']

# Spooler registry
SPOOLERS = {
    'win32': WindowsSpooler,
    'cups': CupsSpooler,
}


def get_spooler(platform: str = None) -> BaseSpooler:
    """Get the spooler backend for a platform (defaults to the running one)."""
    platform = platform or sys.platform
    return SPOOLERS.get(platform, SPOOLERS['cups'])()
