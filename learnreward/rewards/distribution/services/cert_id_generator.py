"""Deterministic certificate identifier generation."""

import hashlib
from typing import Set

from learnreward.rewards.utils.config import CERT_ID_PREFIX, CERT_ID_LENGTH, CERT_ID_SALT
from ..interfaces.cert_id_generator import CertIdGenerator

BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


class SaltedCertIdGenerator(CertIdGenerator):
    """
    Issues ``CERT-XXXXXXXXX`` identifiers derived from a salt and a counter.

    The same salt always yields the same sequence, so tests can assert exact
    identifiers. An identifier already issued by this instance is never
    returned again.
    """

    def __init__(self, salt: str = CERT_ID_SALT, prefix: str = CERT_ID_PREFIX, length: int = CERT_ID_LENGTH):
        if length <= 0:
            raise ValueError(f"Certificate id length must be positive, got {length}")
        self.salt = salt
        self.prefix = prefix
        self.length = length
        self._counter = 0
        self._issued: Set[str] = set()

    def _derive(self, counter: int) -> str:
        digest = hashlib.sha256(f"{self.salt}:{counter}".encode("utf-8")).digest()
        encoded = _to_base36(int.from_bytes(digest, "big")).rjust(self.length, "0")
        return f"{self.prefix}{encoded[:self.length]}"

    def next_id(self) -> str:
        cert_id = self._derive(self._counter)
        self._counter += 1
        while cert_id in self._issued:
            cert_id = self._derive(self._counter)
            self._counter += 1
        self._issued.add(cert_id)
        return cert_id

    @property
    def issued_count(self) -> int:
        return len(self._issued)
