"""Exceptions raised by ProNet."""

from typing import Dict


class ProNetError(Exception):
    """Base class for ProNet errors."""


class ValidationError(ProNetError):
    """One or more form fields failed validation.

    ``errors`` maps field name to the user-facing message.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{name}: {msg}" for name, msg in self.errors.items()))


class NotFoundError(ProNetError):
    """An entity id could not be resolved."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")


class ConfigError(ProNetError):
    """A configuration value could not be parsed."""
