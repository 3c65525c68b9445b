import threading

import pytest

from print_broker.app import create_app
from print_broker.errors import SpoolerError
from print_broker.spooler import BaseSpooler


class FakeSpooler(BaseSpooler):
    """In-memory spooler that records every call.

    ``fail`` maps a step name (open, start_document, write, end_document,
    close) to the error code that step should fail with.
    """

    def __init__(self, printers=None, fail=None, fail_printers=None):
        self.printers = list(printers or [])
        self.fail = dict(fail or {})
        self.fail_printers = dict(fail_printers or {})
        self.calls = []
        self.jobs = []
        self.open_handles = set()
        self._next = 0
        self._lock = threading.Lock()

    def _record(self, step, *args):
        with self._lock:
            self.calls.append((step,) + args)
        if step in self.fail:
            raise SpoolerError(self.fail[step], f'{step} failed')

    def list_printers(self):
        return list(self.printers)

    def open(self, printer_name):
        if printer_name in self.fail_printers:
            raise SpoolerError(self.fail_printers[printer_name], 'no such printer')
        self._record('open', printer_name)
        with self._lock:
            self._next += 1
            handle = (printer_name, self._next)
            self.open_handles.add(handle)
        return handle

    def start_document(self, handle, document_name):
        self._record('start_document', handle, document_name)

    def write(self, handle, data):
        self._record('write', handle, data)
        with self._lock:
            self.jobs.append((handle[0], data))
        return len(data)

    def end_document(self, handle):
        self._record('end_document', handle)

    def close(self, handle):
        with self._lock:
            self.open_handles.discard(handle)
        self._record('close', handle)

    def steps(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def spooler():
    return FakeSpooler(printers=['SATO CL4NX', 'Zebra ZD421', 'Microsoft Print to PDF'])


@pytest.fixture
def app(spooler):
    app = create_app(spooler)
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
