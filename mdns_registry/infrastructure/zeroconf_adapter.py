"""Conversion of registration descriptors into zeroconf service records.

Only builds the ``zeroconf.ServiceInfo`` record; registering it on the
network is left to the announcement layer that owns the ``Zeroconf``
instance.
"""

from __future__ import annotations

import ipaddress
from collections.abc import Mapping
from typing import Any

from zeroconf import ServiceInfo

from ..domain.models import RegistrationDescriptor

LOCAL_SUFFIX = ".local."
DEFAULT_PROTOCOL = "tcp"
MAX_LABEL_BYTES = 63


def _option(options: Any, name: str) -> Any:
    if options is None:
        return None
    if isinstance(options, Mapping):
        return options.get(name)
    return getattr(options, name, None)


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def instance_label(descriptor: RegistrationDescriptor) -> str:
    """Return the DNS instance label for ``descriptor``.

    DNS labels hold at most 63 bytes. Longer instance ids keep their last
    63 bytes so the unique token at the end survives the cut.
    """
    encoded = descriptor.instance_id.encode("utf-8")
    if len(encoded) <= MAX_LABEL_BYTES:
        return descriptor.instance_id
    return encoded[-MAX_LABEL_BYTES:].decode("utf-8", errors="ignore")


def service_type_for(descriptor: RegistrationDescriptor) -> str:
    """Return the DNS-SD service type, e.g. ``_http._tcp.local.``.

    The ``type`` discovery option wins over the scheme; a value that is
    already fully qualified is used as is.
    """
    service_type = _option(descriptor.discovery_options, "type") or descriptor.scheme
    if service_type.endswith(LOCAL_SUFFIX):
        return service_type
    protocol = _option(descriptor.discovery_options, "protocol") or DEFAULT_PROTOCOL
    return f"_{service_type.lstrip('_')}._{protocol.lstrip('_')}{LOCAL_SUFFIX}"


def to_service_info(descriptor: RegistrationDescriptor) -> ServiceInfo:
    """Build the zeroconf record announcing ``descriptor``.

    The instance id becomes the instance label, shortened by
    ``instance_label`` when needed, and the metadata becomes the TXT record.
    """
    service_type = service_type_for(descriptor)
    kwargs: dict[str, Any] = {}
    if _is_ip_address(descriptor.host):
        kwargs["parsed_addresses"] = [descriptor.host]
    else:
        host = descriptor.host
        kwargs["server"] = host if host.endswith(".") else f"{host}."

    return ServiceInfo(
        type_=service_type,
        name=f"{instance_label(descriptor)}.{service_type}",
        port=descriptor.port,
        properties=descriptor.txt_record(),
        **kwargs,
    )
