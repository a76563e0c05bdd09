"""Domain services containing registration rules.

These are the defaulting and merging rules applied when a configuration
becomes a descriptor. They are pure and do not touch any collaborator.
"""

from collections.abc import Mapping
from typing import Any

from .exceptions import ValidationError

DEFAULT_SCHEME = "http"
SECURE_SCHEME = "https"
DEFAULT_VERSION = "latest"

META_DOMAIN = "domain"
META_VERSION = "version"
META_SECURE = "secure"
META_SERVICE_ID = "serviceId"
META_STATUS = "status"

DERIVED_METADATA_KEYS = (META_DOMAIN, META_VERSION, META_SECURE, META_SERVICE_ID)

MIN_PORT = 1
MAX_PORT = 65535


class RegistrationRules:
    """Defaulting, validation and merge rules for service registrations."""

    @staticmethod
    def check_port(port: Any) -> ValidationError | None:
        """Return the error for an unusable port, or None if it is valid.

        An unset port (None or 0) is reported as missing.
        """
        if not port:
            return ValidationError("port is required", field="port")
        if isinstance(port, bool) or not isinstance(port, int) or not MIN_PORT <= port <= MAX_PORT:
            return ValidationError(
                f"port must be between {MIN_PORT} and {MAX_PORT}",
                field="port",
                details={"value": port},
            )
        return None

    @staticmethod
    def check_token(token: Any) -> ValidationError | None:
        """Return the error for an unusable instance token, or None if it is valid."""
        if not token or not isinstance(token, str):
            return ValidationError(
                "unique token generator returned an empty token",
                field="instanceId",
                details={"value": token},
            )
        return None

    @staticmethod
    def resolve_scheme(discovery_options: Any) -> str:
        """Read the scheme from discovery options, defaulting to http.

        Accepts an options model (or any object with a ``scheme``
        attribute) as well as a plain mapping.
        """
        if discovery_options is None:
            return DEFAULT_SCHEME
        if isinstance(discovery_options, Mapping):
            scheme = discovery_options.get("scheme")
        else:
            scheme = getattr(discovery_options, "scheme", None)
        return scheme or DEFAULT_SCHEME

    @staticmethod
    def is_secure(scheme: str) -> bool:
        return scheme == SECURE_SCHEME

    @staticmethod
    def resolve_version(version: str | None) -> str:
        return version or DEFAULT_VERSION

    @staticmethod
    def derive_instance_id(
        service_name: str,
        version: str,
        explicit_id: str | None = None,
        token: str = "",
    ) -> str:
        """Derive the instance id.

        Args:
            service_name: Name of the service
            version: Resolved version
            explicit_id: Caller supplied stable id seed
            token: Random unique token, used only without an explicit id

        Returns:
            ``{explicit_id}-{version}`` or ``{service_name}-{version}-{token}``
        """
        if explicit_id:
            return f"{explicit_id}-{version}"
        return f"{service_name}-{version}-{token}"

    @staticmethod
    def assemble_metadata(
        caller_metadata: Mapping[str, Any] | None,
        *,
        domain: str | None,
        version: str,
        secure: bool,
        instance_id: str,
        status: str | None = None,
    ) -> dict[str, str]:
        """Layer the derived keys over caller metadata.

        Derived keys are written after caller keys and win on collision.
        Caller values that are not strings are converted with ``str()``.
        """
        metadata = {str(k): str(v) for k, v in (caller_metadata or {}).items()}
        metadata.update(
            {
                META_DOMAIN: domain or "",
                META_VERSION: version,
                META_SECURE: "true" if secure else "false",
                META_SERVICE_ID: instance_id,
            }
        )
        if status:
            metadata[META_STATUS] = status
        return metadata
