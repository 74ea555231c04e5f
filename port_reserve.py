# port_reserve.py

import contextlib
import socket

LOCALHOST = "127.0.0.1"


def ephemeral_port_reserve(ip=LOCALHOST, port=0):
    """
    Reserve a free TCP port for a process that binds it right after us.

    The OS picks a port for a listening socket, then a second socket connects
    to it and the connection is accepted. Closing the accepted side first
    leaves the port in TIME_WAIT, so the OS will not hand it out as an
    ephemeral port again, while a process binding it with SO_REUSEADDR
    (chromedriver does) still can.

    Args:
        ip (str): Interface to reserve the port on.
        port (int): Port to try, 0 lets the OS choose.

    Returns:
        int: The reserved port number.
    """
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        s.bind((ip, port))
        s.listen(1)
        sockname = s.getsockname()

        with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s2:
            s2.connect(sockname)
            sock, _ = s.accept()
            with contextlib.closing(sock):
                return sockname[1]
