"""
Print Broker - Console Entry Point

Run: python -m print_broker
"""

import logging
import sys
import threading

from . import __version__
from .config import DEBUG, HOST, LOG_LEVEL, PORT
from .errors import BindError
from .server import PrintBrokerService


def main():
    """Run the service until interrupted."""
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else LOG_LEVEL,
        format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )

    print("=" * 60)
    print("  Print Broker")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Listening: http://{HOST}:{PORT}")
    print("=" * 60)
    print("  API Endpoints:")
    print("    GET  /printers                        - List printers")
    print("    POST /print                           - Raw print")
    print("    POST /print-sato                      - SATO label print")
    print("=" * 60)

    service = PrintBrokerService()
    try:
        service.start(PORT)
    except BindError as e:
        print(f"  Error starting server: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        pass
    finally:
        service.stop()


if __name__ == '__main__':
    main()
