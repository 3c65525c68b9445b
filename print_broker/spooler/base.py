"""
Base Spooler
============

Abstract base class for OS print spooler backends.

Each primitive either succeeds or raises ``SpoolerError`` carrying the OS
error code. Handles are opaque to callers.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class BaseSpooler(ABC):
    """Abstract base class for print spooler backends."""

    @abstractmethod
    def list_printers(self) -> List[str]:
        """
        List installed printer names.

        Returns:
            Printer names in the order the OS reports them
        """
        pass

    @abstractmethod
    def open(self, printer_name: str) -> Any:
        """
        Open a handle to a named printer.

        Args:
            printer_name: OS-registered printer name

        Returns:
            Opaque printer handle
        """
        pass

    @abstractmethod
    def start_document(self, handle: Any, document_name: str) -> None:
        """Begin a raw document shown as ``document_name`` in the queue."""
        pass

    @abstractmethod
    def write(self, handle: Any, data: bytes) -> int:
        """
        Write the whole buffer in one submission.

        Returns:
            Number of bytes the spooler accepted
        """
        pass

    @abstractmethod
    def end_document(self, handle: Any) -> None:
        """End the document started on ``handle``."""
        pass

    @abstractmethod
    def close(self, handle: Any) -> None:
        """Release the printer handle."""
        pass
