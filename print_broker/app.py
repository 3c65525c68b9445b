"""
Print Broker - Application
==========================

Flask application exposing printer enumeration, raw printing and SATO label
printing on a trusted local port.

Every request is resolved once into a ``Route`` and dispatched from a table,
so unknown method/path pairs all fall through to a single 404.
"""

import enum
import logging
from typing import Optional

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import CORS_HEADERS, CORS_METHODS, CORS_ORIGINS, LABEL_DOCUMENT_NAME
from .driver import print_raw
from .errors import PrintError
from .handlers.sbpl import build_label
from .models import LabelJob, PrintJob, PrintResult, parse_body
from .spooler import BaseSpooler, get_spooler

logger = logging.getLogger(__name__)

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


class Route(enum.Enum):
    PREFLIGHT = 'preflight'
    LIST_PRINTERS = 'list_printers'
    PRINT_RAW = 'print_raw'
    PRINT_LABEL = 'print_label'
    NOT_FOUND = 'not_found'


ROUTES = {
    ('GET', '/printers'): Route.LIST_PRINTERS,
    ('POST', '/print'): Route.PRINT_RAW,
    ('POST', '/print-sato'): Route.PRINT_LABEL,
}


def resolve_route(method: str, path: str) -> Route:
    """Map a request method and path to a route."""
    if method == 'OPTIONS':
        return Route.PREFLIGHT
    return ROUTES.get((method, path), Route.NOT_FOUND)


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype='text/plain')


# =============================================================================
# Route Handlers
# =============================================================================

def _preflight(spooler: BaseSpooler):
    return Response(status=200)


def _list_printers(spooler: BaseSpooler):
    printers = spooler.list_printers()
    logger.info("Returned list of printers")
    return jsonify(printers)


def _submit(spooler: BaseSpooler, printer_name: str, document_name: str,
            data: bytes) -> PrintResult:
    """Run the driver shim and fold print failures into a result."""
    try:
        print_raw(printer_name, document_name, data, spooler=spooler)
        result = PrintResult.ok()
    except PrintError as e:
        result = PrintResult.from_error(e)

    outcome = 'Success' if result.success else f'Failed - {result.message}'
    logger.info(f"Print request to {printer_name}: {outcome}")
    return result


def _print_raw(spooler: BaseSpooler):
    job = PrintJob.from_dict(parse_body(request.get_data()))
    result = _submit(spooler, job.printer_name, job.document_name, job.to_bytes())
    return jsonify(result.to_dict())


def _print_label(spooler: BaseSpooler):
    job = LabelJob.from_dict(parse_body(request.get_data()))
    data = build_label(job.title, job.barcode)
    result = _submit(spooler, job.printer_name, LABEL_DOCUMENT_NAME, data)
    return jsonify(result.to_dict())


def _not_found(spooler: BaseSpooler):
    return _text('Not found', 404)


HANDLERS = {
    Route.PREFLIGHT: _preflight,
    Route.LIST_PRINTERS: _list_printers,
    Route.PRINT_RAW: _print_raw,
    Route.PRINT_LABEL: _print_label,
    Route.NOT_FOUND: _not_found,
}


# =============================================================================
# Application Setup
# =============================================================================

def create_app(spooler: Optional[BaseSpooler] = None) -> Flask:
    """
    Create the print broker application.

    Args:
        spooler: Spooler backend (defaults to the platform spooler)

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    app.config['SPOOLER'] = spooler or get_spooler()

    # Registered before flask-cors so it runs after it and only fills gaps
    @app.after_request
    def _cors_headers(response):
        response.headers.setdefault('Access-Control-Allow-Origin', CORS_ORIGINS)
        response.headers.setdefault('Access-Control-Allow-Methods', ', '.join(CORS_METHODS))
        response.headers.setdefault('Access-Control-Allow-Headers', ', '.join(CORS_HEADERS))
        return response

    CORS(app, origins=CORS_ORIGINS, methods=CORS_METHODS, allow_headers=CORS_HEADERS)

    @app.route('/', defaults={'path': ''}, methods=ALL_METHODS)
    @app.route('/<path:path>', methods=ALL_METHODS)
    def dispatch(path):
        route = resolve_route(request.method, request.path)
        return HANDLERS[route](app.config['SPOOLER'])

    @app.errorhandler(HTTPException)
    def _http_error(e):
        if e.code in (404, 405):
            return _text('Not found', 404)
        return _text(f'Server error: {e.description}', e.code)

    @app.errorhandler(Exception)
    def _server_error(e):
        logger.error(f"Error processing request: {e}")
        return _text(f'Server error: {e}', 500)

    return app
