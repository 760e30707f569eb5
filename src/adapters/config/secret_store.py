"""Secret storage for the TrueCoach session cookie."""

from __future__ import annotations

from typing import Optional

import keyring
from keyring.errors import KeyringError

DEFAULT_SERVICE_NAME = "truecoach-export"


class KeyringSecretStore:
    """Keep the TrueCoach session cookie in the OS keychain.

    get/set/delete never raise: a missing or locked backend reads as "no
    secret" and a failed write returns False so the caller keeps plaintext.
    """

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        self.service_name = service_name

    def get(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, key)
        except KeyringError:
            return None

    def set(self, key: str, value: str) -> bool:
        try:
            if value:
                keyring.set_password(self.service_name, key, value)
            else:
                self.delete(key)
            return True
        except KeyringError:
            return False

    def delete(self, key: str) -> bool:
        try:
            keyring.delete_password(self.service_name, key)
            return True
        except KeyringError:
            return False
