"""Turning an accumulated configuration into a registration descriptor.

``build_registration`` validates, applies defaults and merges metadata. It
never mutates the configuration it is given, so building the same
configuration twice yields two descriptors with distinct random tokens.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from ..domain.exceptions import ValidationError
from ..domain.models import (
    BuildFailure,
    BuildResult,
    BuildSuccess,
    RegistrationConfig,
    RegistrationDescriptor,
)
from ..domain.services import RegistrationRules
from ..ports.logger import LoggerPort
from ..ports.network import IpAddressResolverPort, UniqueIdGeneratorPort


def _fail(error: ValidationError, logger: LoggerPort | None) -> BuildFailure:
    if logger:
        logger.warning("Registration build failed", field=error.field, error=error.message)
    return BuildFailure(error=error)


def build_registration(
    config: RegistrationConfig,
    *,
    ip_resolver: IpAddressResolverPort,
    id_generator: UniqueIdGeneratorPort,
    logger: LoggerPort | None = None,
) -> BuildResult:
    """Validate a configuration and produce a registration descriptor.

    Args:
        config: Accumulated registration fields
        ip_resolver: Queried for the host only when none is configured
        id_generator: Queried once for a token when no instance id is configured
        logger: Optional logger

    Returns:
        BuildSuccess with the descriptor, or BuildFailure carrying a
        ValidationError. No partial descriptor is ever returned.
    """
    service_name = config.service_name
    if not service_name:
        return _fail(ValidationError("serviceName is required", field="serviceName"), logger)

    host = config.host
    if not host:
        host = ip_resolver.get_ip_address()
        if logger:
            logger.debug("Derived host from local address", host=host)

    port_error = RegistrationRules.check_port(config.port)
    if port_error:
        return _fail(port_error, logger)

    scheme = RegistrationRules.resolve_scheme(config.discovery_options)
    version = RegistrationRules.resolve_version(config.version)

    token = ""
    if not config.instance_id:
        token = id_generator.new_unique_id()
        token_error = RegistrationRules.check_token(token)
        if token_error:
            return _fail(token_error, logger)
        if logger:
            logger.debug("Generated instance token", token=token)
    instance_id = RegistrationRules.derive_instance_id(
        service_name, version, explicit_id=config.instance_id, token=token
    )

    metadata = RegistrationRules.assemble_metadata(
        config.metadata,
        domain=config.domain,
        version=version,
        secure=RegistrationRules.is_secure(scheme),
        instance_id=instance_id,
        status=config.status,
    )

    try:
        descriptor = RegistrationDescriptor(
            service_name=service_name,
            host=host,
            port=config.port,
            instance_id=instance_id,
            domain=config.domain,
            tags=tuple(config.tags or ()),
            scheme=scheme,
            metadata=metadata,
            discovery_options=config.discovery_options,
            heartbeat_options=config.heartbeat_options,
        )
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        error = ValidationError(
            f"Invalid registration: {errors[0]['msg']}",
            field=".".join(str(part) for part in errors[0]["loc"]) or None,
            details={"errors": errors},
        )
        error.__cause__ = e
        return _fail(error, logger)

    if logger:
        logger.info(
            "Built registration descriptor",
            service_name=descriptor.service_name,
            instance_id=descriptor.instance_id,
            host=descriptor.host,
            port=descriptor.port,
        )
    return BuildSuccess(descriptor=descriptor)
