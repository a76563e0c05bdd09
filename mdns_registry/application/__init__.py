"""Application layer - Registration building."""

from .builder import MdnsRegistrationBuilder
from .registration import build_registration

__all__ = ["MdnsRegistrationBuilder", "build_registration"]
