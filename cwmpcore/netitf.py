"""Thin IPv4 TCP socket helpers."""

from __future__ import annotations

import socket

LISTEN_BACKLOG = 5


def bind(ipv4: str, port: int) -> socket.socket:
    """Create a TCP socket bound to ``ipv4:port``; raises OSError on failure."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((ipv4, port))
    except (OSError, OverflowError) as exc:
        sock.close()
        if isinstance(exc, OverflowError):
            raise OSError(f"invalid port {port}") from exc
        raise
    return sock


def listen(sock: socket.socket) -> None:
    """Start listening with a backlog of five."""
    sock.listen(LISTEN_BACKLOG)


def accept(sock: socket.socket) -> tuple[socket.socket, str, int]:
    """Accept one connection; return the socket with the peer address and port."""
    conn, (ipv4, port) = sock.accept()
    return conn, ipv4, port


def connect(sock: socket.socket, ipv4: str, port: int) -> None:
    """Connect ``sock`` to ``ipv4:port``; raises OSError on failure."""
    sock.connect((ipv4, port))