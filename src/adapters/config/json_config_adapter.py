"""JSON file-based config adapter."""

import json
import os
import sys
from typing import Optional, Protocol

from src.adapters.config.secret_store import KeyringSecretStore
from src.config import (
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PER_PAGE,
    DEFAULT_REQUEST_DELAY_S,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_STATES,
)
from src.domain.ports import ConfigPort

_DEFAULTS = {
    "session_cookie": "",
    "base_url": DEFAULT_BASE_URL,
    "per_page": DEFAULT_PER_PAGE,
    "states": DEFAULT_STATES,
    "request_delay_s": DEFAULT_REQUEST_DELAY_S,
    "request_timeout_s": DEFAULT_REQUEST_TIMEOUT_S,
    "output_dir": DEFAULT_OUTPUT_DIR,
}
_SECRET_FIELDS = ("session_cookie",)


def _config_dir() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


class SecretStoreProtocol(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> bool:
        ...


class JsonConfigAdapter(ConfigPort):
    """Run settings in config.json; the session cookie is the only secret.

    The cookie goes to the OS keychain and is blanked in the file, unless the
    keychain refuses it.
    """

    def __init__(self, path: str | None = None, secret_store: SecretStoreProtocol | None = None):
        self.path = path or os.path.join(_config_dir(), "config.json")
        self.secret_store = secret_store or KeyringSecretStore()

    def load(self) -> dict:
        cfg = dict(_DEFAULTS)
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf-8") as f:
                cfg.update(json.load(f))

        for field in _SECRET_FIELDS:
            secret = self.secret_store.get(field)
            if secret:
                cfg[field] = secret

        return cfg

    def save(self, cfg: dict) -> None:
        persisted_cfg = dict(cfg)
        for field in _SECRET_FIELDS:
            value = str(cfg.get(field, "") or "")
            stored = self.secret_store.set(field, value)
            # Keep plaintext only if the keychain backend is unavailable.
            persisted_cfg[field] = "" if stored else value

        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(persisted_cfg, f, indent=2)

    def is_configured(self) -> bool:
        cfg = self.load()
        return bool(str(cfg.get("session_cookie") or "").strip())

    def forget_session(self) -> None:
        """Drop the stored session cookie so the next run asks for a fresh one."""
        cfg = self.load()
        cfg["session_cookie"] = ""
        self.save(cfg)
