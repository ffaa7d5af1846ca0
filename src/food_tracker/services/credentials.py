"""Credential handling for user passwords."""

from dataclasses import dataclass
from typing import Protocol


class CredentialVerifier(Protocol):
    """Turns passwords into stored credentials and checks them later."""

    def protect(self, password: str) -> str:
        """Return the value to store for a new password."""

    def verify(self, password: str, stored: str) -> bool:
        """Return True when the password matches the stored credential."""


@dataclass
class PlaintextCredentialVerifier(CredentialVerifier):
    """Stores passwords as given and compares them verbatim.

    This matches how existing user rows were written. Swap in a hashing
    verifier before exposing the service outside a trusted network.
    """

    def protect(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: str) -> bool:
        return password == stored
