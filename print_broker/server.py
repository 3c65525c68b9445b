"""
Print Broker - Service
======================

Owns the listening socket and the serving thread. Each instance serves its
own app, so several services can run side by side (e.g. in tests).
"""

import logging
import threading
from typing import Optional

from werkzeug.serving import make_server

from .app import create_app
from .config import HOST, STOP_TIMEOUT
from .errors import BindError
from .spooler import BaseSpooler

logger = logging.getLogger(__name__)


def _parse_port(port) -> int:
    try:
        value = int(str(port).strip())
    except (TypeError, ValueError):
        raise BindError(f'Invalid port: {port!r}') from None
    if not 0 <= value <= 65535:
        raise BindError(f'Port out of range: {value}')
    return value


class PrintBrokerService:
    """Loopback HTTP print service with an explicit start/stop lifecycle."""

    def __init__(self, spooler: Optional[BaseSpooler] = None, host: str = HOST):
        self.host = host
        self.app = create_app(spooler)
        self._server = None
        self._thread = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._server is not None

    @property
    def port(self) -> Optional[int]:
        """Bound port, or None when stopped."""
        server = self._server
        return server.server_address[1] if server else None

    def start(self, port) -> bool:
        """
        Start serving on ``port`` in a background thread.

        Args:
            port: Port number (int or numeric string); 0 picks a free port

        Returns:
            True if started, False if the service was already running

        Raises:
            BindError: The port is malformed or cannot be bound
        """
        with self._lock:
            if self._server is not None:
                logger.info(f"Server already running on port {self.port}")
                return False

            port = _parse_port(port)
            try:
                server = make_server(self.host, port, self.app, threaded=True)
            except (OSError, SystemExit) as e:
                # werkzeug exits instead of raising when the bind fails
                raise BindError(f'Cannot listen on {self.host}:{port}: {e}') from None

            thread = threading.Thread(
                target=server.serve_forever,
                name=f'print-broker-{server.server_address[1]}',
                daemon=True,
            )
            thread.start()

            self._server = server
            self._thread = thread

        logger.info(f"Server started on port {self.port}")
        return True

    def stop(self) -> bool:
        """
        Stop serving and release the socket.

        Returns:
            True if a running server was stopped, False otherwise
        """
        with self._lock:
            server, thread = self._server, self._thread
            if server is None:
                return False
            self._server = None
            self._thread = None

            server.shutdown()
            server.server_close()
            thread.join(STOP_TIMEOUT)

        logger.info("Server stopped")
        return True
