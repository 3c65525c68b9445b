"""
Windows Spooler
===============

Spooler backend for Windows using the winspool API via pywin32.
"""

import sys
from typing import Any, List

from .base import BaseSpooler
from ..config import SPOOLER_DATATYPE
from ..errors import SpoolerError


def _spooler_error(error) -> SpoolerError:
    """Convert a pywintypes.error into a SpoolerError."""
    return SpoolerError(error.winerror, error.strerror)


class WindowsSpooler(BaseSpooler):
    """Spooler backend for the Windows print spooler."""

    def __init__(self):
        self._check_dependencies()

    def _check_dependencies(self):
        """Check if required modules are available."""
        if sys.platform != 'win32':
            raise RuntimeError("Windows spooler requires Windows")

    def list_printers(self) -> List[str]:
        import win32print

        printers = win32print.EnumPrinters(
            win32print.PRINTER_ENUM_LOCAL | win32print.PRINTER_ENUM_CONNECTIONS
        )
        return [p[2] for p in printers]

    def open(self, printer_name: str) -> Any:
        import pywintypes
        import win32print

        try:
            return win32print.OpenPrinter(printer_name)
        except pywintypes.error as e:
            raise _spooler_error(e) from e

    def start_document(self, handle: Any, document_name: str) -> None:
        import pywintypes
        import win32print

        try:
            # Level 1 DOC_INFO: (name, output file, datatype)
            win32print.StartDocPrinter(handle, 1, (document_name, None, SPOOLER_DATATYPE))
        except pywintypes.error as e:
            raise _spooler_error(e) from e

    def write(self, handle: Any, data: bytes) -> int:
        import pywintypes
        import win32print

        try:
            return win32print.WritePrinter(handle, data)
        except pywintypes.error as e:
            raise _spooler_error(e) from e

    def end_document(self, handle: Any) -> None:
        import pywintypes
        import win32print

        try:
            win32print.EndDocPrinter(handle)
        except pywintypes.error as e:
            raise _spooler_error(e) from e

    def close(self, handle: Any) -> None:
        import pywintypes
        import win32print

        try:
            win32print.ClosePrinter(handle)
        except pywintypes.error as e:
            raise _spooler_error(e) from e
