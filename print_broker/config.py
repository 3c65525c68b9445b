"""
Print Broker Configuration
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

# Parsed by PrintBrokerService.start, so a bad value surfaces as BindError
PORT = os.environ.get('PRINT_BROKER_PORT', '8085')
HOST = os.environ.get('PRINT_BROKER_HOST', '127.0.0.1')
DEBUG = os.environ.get('PRINT_BROKER_DEBUG', 'false').lower() == 'true'
LOG_LEVEL = os.environ.get('PRINT_BROKER_LOG_LEVEL', 'INFO').upper()

# Seconds to wait for the serving thread on stop
STOP_TIMEOUT = 5

# =============================================================================
# CORS
# =============================================================================

CORS_ORIGINS = '*'
CORS_METHODS = ['GET', 'POST', 'OPTIONS']
CORS_HEADERS = ['Content-Type']

# =============================================================================
# Print Defaults
# =============================================================================

DEFAULT_DOCUMENT_NAME = 'Raw Print Job'
LABEL_DOCUMENT_NAME = 'SATO Label'
SUCCESS_MESSAGE = 'Print job sent successfully'

# Windows spooler datatype for passthrough jobs
SPOOLER_DATATYPE = 'RAW'

# =============================================================================
# SBPL (SATO) Label Protocol
# =============================================================================

# SATO firmware expects Shift_JIS text, not UTF-8
SBPL_ENCODING = 'shift_jis'

# Label geometry in dots
SBPL_PAPER_HEIGHT = 480
SBPL_PAPER_WIDTH = 800
