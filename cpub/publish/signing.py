"""Signing and plugin portal keys taken from the environment.

Neither is required: when present they are forwarded to the host tool as
`-P` project properties, the names its signing and plugin-publish plugins
read.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["PluginPortalKeys", "SigningOptions"]

GPG_KEY_ID_ENV = "GPG_KEY_ID"
GPG_PASSWORD_ENV = "GPG_PASSWORD"
GPG_SECRET_KEY_RING_FILE_ENV = "GPG_SECRET_KEY_RING_FILE"
GRADLE_PUBLISH_KEY_ENV = "GRADLE_PUBLISH_KEY"
GRADLE_PUBLISH_SECRET_ENV = "GRADLE_PUBLISH_SECRET"


@dataclass(frozen=True, slots=True)
class SigningOptions:
    key_id: str
    password: str
    secret_key_ring_file: str

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> SigningOptions | None:
        """Signing options if all three GPG variables are set, else None."""
        key_id = env.get(GPG_KEY_ID_ENV, "").strip()
        password = env.get(GPG_PASSWORD_ENV, "").strip()
        ring = env.get(GPG_SECRET_KEY_RING_FILE_ENV, "").strip()
        if not (key_id and password and ring):
            return None
        return cls(key_id=key_id, password=password, secret_key_ring_file=ring)

    def project_properties(self) -> dict[str, str]:
        return {
            "signing.keyId": self.key_id,
            "signing.password": self.password,
            "signing.secretKeyRingFile": self.secret_key_ring_file,
        }

    def __repr__(self) -> str:
        return f"SigningOptions(key_id={self.key_id!r})"


@dataclass(frozen=True, slots=True)
class PluginPortalKeys:
    key: str
    secret: str

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> PluginPortalKeys | None:
        key = env.get(GRADLE_PUBLISH_KEY_ENV, "").strip()
        secret = env.get(GRADLE_PUBLISH_SECRET_ENV, "").strip()
        if not (key and secret):
            return None
        return cls(key=key, secret=secret)

    def project_properties(self) -> dict[str, str]:
        return {"gradle.publish.key": self.key, "gradle.publish.secret": self.secret}

    def __repr__(self) -> str:
        return "PluginPortalKeys(key='***')"
