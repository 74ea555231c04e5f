import contextlib
import socket
from concurrent.futures import ThreadPoolExecutor

from port_reserve import LOCALHOST, ephemeral_port_reserve


def test_returns_valid_port():
    port = ephemeral_port_reserve()
    assert 0 < port < 65536


def test_reserved_port_is_bindable_with_reuseaddr():
    for _ in range(5):
        port = ephemeral_port_reserve()
        with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((LOCALHOST, port))
            s.listen(1)
            assert s.getsockname()[1] == port


def test_port_in_use_is_not_returned_again():
    port = ephemeral_port_reserve()
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        s.bind((LOCALHOST, port))
        s.listen(1)
        others = {ephemeral_port_reserve() for _ in range(10)}
    assert port not in others


def test_concurrent_reservations_are_distinct():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ports = list(pool.map(lambda _: ephemeral_port_reserve(), range(8)))
    assert len(set(ports)) == len(ports)
