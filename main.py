#!/usr/bin/env python
"""
Print Broker - Standalone Entry Point

Run directly:
    python main.py

Or with environment variables:
    PRINT_BROKER_PORT=8090 python main.py
"""

from print_broker.__main__ import main


if __name__ == '__main__':
    main()
