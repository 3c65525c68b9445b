"""
Print Broker Handlers
=====================

Label protocol encoders.
"""

from .sbpl import build_label

__all__ = ['build_label']
