"""Tests for registration domain models."""

import pytest
from pydantic import ValidationError

from mdns_registry.domain.exceptions import ValidationError as RegistrationValidationError
from mdns_registry.domain.models import (
    BuildFailure,
    BuildSuccess,
    HeartbeatOptions,
    MdnsDiscoveryOptions,
    RegistrationConfig,
    RegistrationDescriptor,
)


def make_descriptor(**overrides):
    fields = {
        "service_name": "orders",
        "host": "10.0.0.5",
        "port": 8080,
        "instance_id": "orders-latest-token",
        "metadata": {
            "domain": "",
            "version": "latest",
            "secure": "false",
            "serviceId": "orders-latest-token",
        },
    }
    fields.update(overrides)
    return RegistrationDescriptor(**fields)


class TestRegistrationDescriptor:
    """Test cases for RegistrationDescriptor."""

    def test_defaults(self):
        """Test optional field defaults."""
        descriptor = make_descriptor()
        assert descriptor.domain is None
        assert descriptor.tags == ()
        assert descriptor.scheme == "http"
        assert descriptor.discovery_options is None
        assert descriptor.heartbeat_options is None

    def test_immutability(self):
        """Test that fields cannot be reassigned."""
        descriptor = make_descriptor()
        with pytest.raises(ValidationError):
            descriptor.port = 9090  # type: ignore
        with pytest.raises(ValidationError):
            descriptor.metadata = {}  # type: ignore

    def test_metadata_is_read_only(self):
        """Test that metadata items cannot be added, replaced or removed."""
        descriptor = make_descriptor()
        with pytest.raises(TypeError):
            descriptor.metadata["serviceId"] = "other"  # type: ignore
        with pytest.raises(TypeError):
            descriptor.metadata["extra"] = "x"  # type: ignore
        with pytest.raises(TypeError):
            del descriptor.metadata["serviceId"]  # type: ignore

        assert descriptor.metadata["serviceId"] == "orders-latest-token"
        assert "extra" not in descriptor.metadata

    def test_metadata_does_not_alias_input(self):
        """Test that changing the input dict after construction has no effect."""
        metadata = {"domain": "", "version": "latest", "secure": "false", "serviceId": "x"}
        descriptor = make_descriptor(metadata=metadata)
        del metadata["serviceId"]

        assert descriptor.metadata["serviceId"] == "x"

    def test_default_metadata_is_read_only(self):
        """Test that the empty default is read-only as well."""
        descriptor = RegistrationDescriptor(
            service_name="orders", host="10.0.0.5", port=8080, instance_id="orders-1"
        )
        with pytest.raises(TypeError):
            descriptor.metadata["k"] = "v"  # type: ignore

    def test_model_dump_returns_plain_metadata(self):
        """Test that serialization yields a plain dict."""
        dumped = make_descriptor().model_dump()
        assert type(dumped["metadata"]) is dict
        assert dumped["metadata"]["serviceId"] == "orders-latest-token"

    def test_txt_record_is_a_copy(self):
        """Test that the TXT payload does not alias the metadata."""
        descriptor = make_descriptor()
        record = descriptor.txt_record()
        record["extra"] = "x"

        assert "extra" not in descriptor.metadata
        assert record["serviceId"] == "orders-latest-token"

    def test_convenience_properties(self):
        """Test version, status, is_secure and uri."""
        descriptor = make_descriptor(
            scheme="https",
            metadata={
                "domain": "",
                "version": "3",
                "secure": "true",
                "serviceId": "x",
                "status": "up",
            },
        )
        assert descriptor.version == "3"
        assert descriptor.status == "up"
        assert descriptor.is_secure is True
        assert descriptor.uri == "https://10.0.0.5:8080"

    @pytest.mark.parametrize("port", [0, 65536])
    def test_port_range(self, port):
        """Test that invalid ports are rejected by the model."""
        with pytest.raises(ValidationError):
            make_descriptor(port=port)

    def test_empty_service_name_rejected(self):
        """Test that an empty service name is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            make_descriptor(service_name="")
        assert "at least 1 character" in str(exc_info.value)

    def test_strict_metadata_values(self):
        """Test that metadata values must already be strings."""
        with pytest.raises(ValidationError):
            make_descriptor(metadata={"version": 1})


class TestOptions:
    """Test cases for discovery and heartbeat options."""

    def test_discovery_options_defaults(self):
        """Test default discovery options."""
        options = MdnsDiscoveryOptions()
        assert options.scheme is None
        assert options.type is None
        assert options.protocol == "tcp"
        assert options.subtypes == []

    def test_discovery_options_allow_extra_fields(self):
        """Test that unknown options are kept for the announcement layer."""
        options = MdnsDiscoveryOptions(scheme="https", ttl=120)
        assert options.model_extra == {"ttl": 120}

    def test_discovery_options_protocol(self):
        """Test that only tcp and udp are accepted."""
        assert MdnsDiscoveryOptions(protocol="udp").protocol == "udp"
        with pytest.raises(ValidationError):
            MdnsDiscoveryOptions(protocol="sctp")

    def test_heartbeat_options(self):
        """Test heartbeat option defaults and bounds."""
        options = HeartbeatOptions()
        assert options.enabled is True
        assert options.ttl_in_seconds is None
        with pytest.raises(ValidationError):
            HeartbeatOptions(ttl_in_seconds=0)


class TestRegistrationConfig:
    """Test cases for the mutable configuration."""

    def test_all_fields_optional(self):
        """Test that an empty configuration can be created."""
        config = RegistrationConfig()
        assert config.service_name is None
        assert config.port is None
        assert config.tags == []
        assert config.metadata is None

    def test_assignment_not_validated(self):
        """Test that assigning an unusable value does not fail."""
        config = RegistrationConfig()
        config.port = "not-a-port"  # type: ignore
        assert config.port == "not-a-port"


class TestBuildResult:
    """Test cases for BuildSuccess and BuildFailure."""

    def test_success_unwrap(self):
        """Test that unwrap returns the descriptor."""
        descriptor = make_descriptor()
        result = BuildSuccess(descriptor=descriptor)
        assert result.ok is True
        assert result.unwrap() is descriptor

    def test_failure_unwrap_raises(self):
        """Test that unwrap raises the carried error."""
        error = RegistrationValidationError("port is required", field="port")
        result = BuildFailure(error=error)
        assert result.ok is False
        with pytest.raises(RegistrationValidationError) as exc_info:
            result.unwrap()
        assert exc_info.value is error
