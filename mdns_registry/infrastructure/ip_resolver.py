"""Local IP address lookup using a UDP socket."""

from __future__ import annotations

import socket

from ..ports.logger import LoggerPort
from ..ports.network import IpAddressResolverPort


class SocketIpAddressResolver(IpAddressResolverPort):
    """Resolves the primary outbound IPv4 address of this host.

    Connecting a UDP socket sends no packets; it only makes the kernel pick
    the interface that would route to that address, whose address is
    then read back from the socket.
    """

    def __init__(
        self,
        route_host: str = "8.8.8.8",
        route_port: int = 80,
        fallback: str = "127.0.0.1",
        logger: LoggerPort | None = None,
    ):
        """Initialize the resolver.

        Args:
            route_host: Address used to select the outbound interface
            route_port: Port paired with the route address
            fallback: Address returned when no route is available
            logger: Optional logger
        """
        self._route = (route_host, route_port)
        self._fallback = fallback
        self._logger = logger

    def get_ip_address(self) -> str:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.connect(self._route)
                return sock.getsockname()[0]
        except OSError as e:
            if self._logger:
                self._logger.debug(
                    "Local address lookup failed, using fallback",
                    fallback=self._fallback,
                    error=str(e),
                )
            return self._fallback
