"""Unique token generator backed by uuid4."""

import uuid

from ..ports.network import UniqueIdGeneratorPort


class Uuid4Generator(UniqueIdGeneratorPort):
    """Default token generator returning random 128-bit UUIDs."""

    def new_unique_id(self) -> str:
        return str(uuid.uuid4())
