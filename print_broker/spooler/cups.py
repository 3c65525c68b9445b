"""
CUPS Spooler
============

Spooler backend for Linux/macOS using the CUPS command line tools.

CUPS has no handle-based API on the command line, so the handle records the
printer and document name and ``write`` submits the buffer with ``lp -o raw``.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .base import BaseSpooler
from ..errors import SpoolerError

logger = logging.getLogger(__name__)


@dataclass
class CupsHandle:
    """Printer handle for a CUPS destination."""

    printer_name: str
    document_name: Optional[str] = None
    job_id: Optional[str] = None
    closed: bool = False


class CupsSpooler(BaseSpooler):
    """Spooler backend for CUPS (lpstat / lp)."""

    def _run(self, args: list, data: Optional[bytes] = None) -> subprocess.CompletedProcess:
        return subprocess.run(args, input=data, capture_output=True)

    def list_printers(self) -> List[str]:
        result = self._run(['lpstat', '-a'])
        if result.returncode != 0:
            # lpstat exits non-zero when no destinations are configured
            logger.warning(f"lpstat failed: {result.stderr.decode(errors='replace').strip()}")
            return []
        out = result.stdout.decode(errors='replace')
        return [line.split()[0] for line in out.splitlines() if line.strip()]

    def open(self, printer_name: str) -> CupsHandle:
        result = self._run(['lpstat', '-p', printer_name])
        if result.returncode != 0:
            raise SpoolerError(result.returncode, result.stderr.decode(errors='replace').strip())
        return CupsHandle(printer_name=printer_name)

    def start_document(self, handle: CupsHandle, document_name: str) -> None:
        if handle.closed:
            raise SpoolerError(-1, 'Printer handle is closed')
        handle.document_name = document_name

    def write(self, handle: CupsHandle, data: bytes) -> int:
        if handle.closed or handle.document_name is None:
            raise SpoolerError(-1, 'No document started on handle')

        result = self._run(
            ['lp', '-d', handle.printer_name, '-t', handle.document_name, '-o', 'raw'],
            data=data,
        )
        if result.returncode != 0:
            raise SpoolerError(result.returncode, result.stderr.decode(errors='replace').strip())

        # "request id is <printer>-<n> (1 file(s))"
        out = result.stdout.decode(errors='replace').split()
        if len(out) >= 4 and out[0] == 'request':
            handle.job_id = out[3]
        return len(data)

    def end_document(self, handle: CupsHandle) -> None:
        handle.document_name = None

    def close(self, handle: CupsHandle) -> None:
        handle.closed = True
