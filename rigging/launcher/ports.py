import socket
from contextlib import ExitStack


def allocate_ports(count: int, host: str = "127.0.0.1") -> list[int]:
    """
    Reserve ``count`` distinct free TCP ports on ``host``. All sockets
    stay bound until every port is chosen so no port repeats.
    """
    with ExitStack() as stack:
        ports: list[int] = []
        for _ in range(count):
            sock = stack.enter_context(
                socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            )
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, 0))
            ports.append(sock.getsockname()[1])

        return ports
