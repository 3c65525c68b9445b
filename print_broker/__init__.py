"""
Print Broker
============

Local print broker for browser-based apps.

Supports:
- Raw passthrough printing to any installed printer (Windows spooler or CUPS)
- SATO label printers (via SBPL)

Usage:
    python -m print_broker

API Endpoints:
    GET  /printers    - List installed printers
    POST /print       - Raw print (text or base64 data)
    POST /print-sato  - Print a SATO title + barcode label
"""

__version__ = '1.0.0'
__author__ = 'EGS Software AG'
