"""
Job Models
==========

Print and label jobs parsed from request bodies. Created per request,
consumed once, never persisted.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Dict

from ..config import DEFAULT_DOCUMENT_NAME
from ..errors import DecodeError, ParseError


def parse_body(body: bytes) -> Dict[str, Any]:
    """Parse a JSON object body into a dict with lower-cased keys."""
    try:
        data = json.loads(body or b'null')
    except ValueError as e:
        raise ParseError(f'Invalid JSON body: {e}') from e

    if not isinstance(data, dict):
        raise ParseError('Request body must be a JSON object')

    # Field names match case-insensitively (PrinterName, printerName, ...)
    return {str(k).lower(): v for k, v in data.items()}


def _require_str(data: Dict[str, Any], field: str) -> str:
    value = data.get(field.lower())
    if value is None:
        raise ParseError(f'{field} required')
    if not isinstance(value, str):
        raise ParseError(f'{field} must be a string')
    return value


@dataclass(frozen=True)
class PrintJob:
    """Raw print job (POST /print)."""

    printer_name: str
    document_name: str
    payload: str
    payload_is_base64: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PrintJob':
        """Create from a parsed request body."""
        document_name = data.get('documentname')
        if document_name is None:
            document_name = DEFAULT_DOCUMENT_NAME
        elif not isinstance(document_name, str):
            raise ParseError('DocumentName must be a string')

        is_base64 = data.get('isbase64', False)
        if not isinstance(is_base64, bool):
            raise ParseError('IsBase64 must be a boolean')

        return cls(
            printer_name=_require_str(data, 'PrinterName'),
            document_name=document_name,
            payload=_require_str(data, 'Data'),
            payload_is_base64=is_base64,
        )

    def to_bytes(self) -> bytes:
        """Payload bytes to send: base64-decoded, or the text as UTF-8."""
        if not self.payload_is_base64:
            return self.payload.encode('utf-8')

        try:
            # Whitespace is tolerated, anything else outside the alphabet is not
            return base64.b64decode(''.join(self.payload.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f'Invalid base64 data: {e}') from e


@dataclass(frozen=True)
class LabelJob:
    """SATO label job (POST /print-sato)."""

    printer_name: str
    title: str
    barcode: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LabelJob':
        """Create from a parsed request body."""
        return cls(
            printer_name=_require_str(data, 'PrinterName'),
            title=_require_str(data, 'Title'),
            barcode=_require_str(data, 'Barcode'),
        )
