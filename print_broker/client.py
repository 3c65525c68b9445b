"""
Print Broker Client
===================

Python SDK for interacting with the Print Broker.

Usage:
    from print_broker.client import PrintClient

    client = PrintClient('http://localhost:8085')

    # List printers
    printers = client.list_printers()

    # Raw print
    result = client.print_raw('Zebra ZD421', b'^XA^FO50,50^FDHello^FS^XZ')

    # SATO label
    result = client.print_label('SATO CL4NX', 'BOX1', '12345')
"""

import base64
import requests
from typing import Dict, Any, List, Union

from .config import DEFAULT_DOCUMENT_NAME


class PrintClient:
    """Client for the Print Broker."""

    def __init__(self, base_url: str = 'http://localhost:8085', timeout: int = 60):
        """
        Initialize client.

        Args:
            base_url: Base URL of the print broker
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, data: Dict = None) -> Any:
        """Make API request."""
        url = f'{self.base_url}{endpoint}'

        try:
            if method == 'GET':
                response = requests.get(url, timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, json=data, timeout=self.timeout)
            else:
                raise ValueError(f'Unknown method: {method}')

            if response.status_code != 200:
                return {'Success': False, 'Message': response.text}
            return response.json()

        except requests.exceptions.Timeout:
            return {'Success': False, 'Message': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'Success': False, 'Message': f'Cannot connect to {self.base_url}'}

    # =========================================================================
    # Printers
    # =========================================================================

    def list_printers(self) -> List[str]:
        """List installed printer names (empty if the broker is unreachable)."""
        result = self._request('GET', '/printers')
        return result if isinstance(result, list) else []

    # =========================================================================
    # Printing
    # =========================================================================

    def print_raw(self, printer_name: str, data: Union[bytes, str],
                  document_name: str = DEFAULT_DOCUMENT_NAME,
                  as_base64: bool = True) -> Dict[str, Any]:
        """
        Send raw printer data.

        Args:
            printer_name: Target printer name
            data: Printer language bytes, or text sent as UTF-8
            document_name: Job name in the print queue
            as_base64: Base64-encode the payload (required for binary data)
        """
        if isinstance(data, str):
            data = data.encode('utf-8')

        if as_base64:
            payload = base64.b64encode(data).decode('ascii')
        else:
            payload = data.decode('utf-8')

        return self._request('POST', '/print', {
            'PrinterName': printer_name,
            'DocumentName': document_name,
            'Data': payload,
            'IsBase64': as_base64,
        })

    def print_label(self, printer_name: str, title: str, barcode: str) -> Dict[str, Any]:
        """
        Print a SATO title + barcode label.

        Args:
            printer_name: Target SATO printer name
            title: Label title
            barcode: CODE39 barcode value (must not contain '*')
        """
        return self._request('POST', '/print-sato', {
            'PrinterName': printer_name,
            'Title': title,
            'Barcode': barcode,
        })
