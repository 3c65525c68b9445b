"""
Printer Driver Shim
===================

Submits an opaque byte buffer to a named printer through the spooler
open / start document / write / end document / close lifecycle.
"""

import logging
from typing import Optional

from .errors import (
    OpenFailed, PrintError, SpoolerError, StartFailed, Unexpected, WriteFailed,
)
from .spooler import BaseSpooler, get_spooler

logger = logging.getLogger(__name__)


def print_raw(printer_name: str, document_name: str, data: bytes,
              spooler: Optional[BaseSpooler] = None) -> None:
    """
    Send raw bytes to a printer.

    Args:
        printer_name: OS-registered printer name
        document_name: Display name of the job in the print queue
        data: Bytes passed through to the printer untouched
        spooler: Spooler backend (defaults to the platform spooler)

    Raises:
        OpenFailed: The printer could not be opened
        StartFailed: The document could not be started
        WriteFailed: The spooler rejected the data
        Unexpected: Any other fault during submission
    """
    handle = None
    doc_started = False

    try:
        spooler = spooler or get_spooler()

        try:
            handle = spooler.open(printer_name)
        except SpoolerError as e:
            raise OpenFailed(e.code) from e

        try:
            spooler.start_document(handle, document_name)
        except SpoolerError as e:
            raise StartFailed(e.code) from e
        doc_started = True

        try:
            written = spooler.write(handle, data)
        except SpoolerError as e:
            raise WriteFailed(e.code) from e
        logger.debug(f"Wrote {written}/{len(data)} bytes to {printer_name}")

    except PrintError:
        raise
    except Exception as e:
        raise Unexpected(str(e)) from e
    finally:
        if doc_started:
            _cleanup(spooler.end_document, handle, 'end document')
        if handle is not None:
            _cleanup(spooler.close, handle, 'close printer')


def _cleanup(step, handle, label: str):
    """Run a cleanup step; failures are logged, never raised."""
    try:
        step(handle)
    except Exception as e:
        logger.warning(f"Failed to {label}: {e}")
