"""
Identifier generation for workflow instances.

Instances saved without an id receive one from the configured generator.

Dependencies: uuid (stdlib)
System role: Default identifier source for the instance store
"""

import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Produces unique string identifiers."""

    def generate(self) -> str: ...


class UuidIdGenerator:
    """Generate 32-character hex identifiers from random UUID4 values."""

    def generate(self) -> str:
        return uuid.uuid4().hex
