import socket
import threading

import pytest
import requests

from print_broker.errors import BindError
from print_broker.server import PrintBrokerService

from conftest import FakeSpooler


@pytest.fixture
def service(spooler):
    service = PrintBrokerService(spooler)
    yield service
    service.stop()


def url(service, path):
    return f'http://127.0.0.1:{service.port}{path}'


def test_start_and_stop(service):
    assert not service.is_running
    assert service.port is None

    assert service.start(0) is True
    assert service.is_running
    assert requests.get(url(service, '/printers'), timeout=5).status_code == 200

    port = service.port
    assert service.stop() is True
    assert not service.is_running
    with pytest.raises(requests.exceptions.ConnectionError):
        requests.get(f'http://127.0.0.1:{port}/printers', timeout=5)


def test_start_is_non_blocking_and_accepts_string_port(service):
    assert service.start('0') is True
    assert service.is_running


def test_double_start_keeps_one_listener(service):
    service.start(0)
    port = service.port

    assert service.start(0) is False
    assert service.port == port
    assert requests.get(url(service, '/printers'), timeout=5).status_code == 200


def test_stop_is_idempotent(service):
    assert service.stop() is False
    service.start(0)
    assert service.stop() is True
    assert service.stop() is False


def test_restart_after_stop(service):
    service.start(0)
    service.stop()

    assert service.start(0) is True
    assert requests.get(url(service, '/printers'), timeout=5).json() == [
        'SATO CL4NX', 'Zebra ZD421', 'Microsoft Print to PDF',
    ]


@pytest.mark.parametrize('port', ['abc', '', None, -1, 65536, '80.5'])
def test_malformed_port(service, port):
    with pytest.raises(BindError):
        service.start(port)
    assert not service.is_running


def test_port_in_use(service):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        sock.listen(1)
        port = sock.getsockname()[1]

        with pytest.raises(BindError):
            service.start(port)
    assert not service.is_running


def test_two_services_coexist():
    first = PrintBrokerService(FakeSpooler(printers=['A']))
    second = PrintBrokerService(FakeSpooler(printers=['B']))
    try:
        first.start(0)
        second.start(0)

        assert requests.get(url(first, '/printers'), timeout=5).json() == ['A']
        assert requests.get(url(second, '/printers'), timeout=5).json() == ['B']
    finally:
        first.stop()
        second.stop()


def test_cors_headers_on_live_responses(service):
    service.start(0)

    response = requests.delete(url(service, '/print'), timeout=5)

    assert response.status_code == 404
    assert response.text == 'Not found'
    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_concurrent_jobs_are_independent():
    release = threading.Event()

    class SlowSpooler(FakeSpooler):
        def write(self, handle, data):
            # Block the good printer until the failing request has finished
            if handle[0] == 'Good':
                assert release.wait(5)
            return super().write(handle, data)

    spooler = SlowSpooler(fail_printers={'Bad': 1801})
    service = PrintBrokerService(spooler)
    service.start(0)
    results = {}

    def submit(printer):
        results[printer] = requests.post(url(service, '/print'), json={
            'PrinterName': printer,
            'DocumentName': 'Job',
            'Data': printer,
        }, timeout=10).json()

    try:
        good = threading.Thread(target=submit, args=('Good',))
        good.start()

        # The slow job must not block other requests
        submit('Bad')
        assert requests.get(url(service, '/printers'), timeout=5).status_code == 200
        assert requests.options(url(service, '/print'), timeout=5).status_code == 200

        release.set()
        good.join(10)
    finally:
        release.set()
        service.stop()

    assert results['Good'] == {'Success': True, 'Message': 'Print job sent successfully'}
    assert results['Bad'] == {'Success': False, 'Message': 'Failed to open printer. Error: 1801'}
    assert spooler.jobs == [('Good', b'Good')]
    assert not spooler.open_handles
