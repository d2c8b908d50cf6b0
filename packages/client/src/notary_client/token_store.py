"""
token_store.py — Persisted access/refresh tokens and the signed-in user.

Tokens live in a small JSON file (settings.token_store_path) so CLI
invocations share one session. The file is written with 0600 permissions.

current_user() prefers the stored profile and falls back to the unverified
claims of the access token; the backend is the one that verifies signatures.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import structlog
from jose import JWTError, jwt

from notary_shared.config import settings
from notary_shared.models import AuthUser

log = structlog.get_logger(__name__)


class TokenStore:
    """JSON-file token store. Pass `path=None` to use settings.token_store_path."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else settings.token_store_path

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("token_store_unreadable", path=str(self._path), error=str(exc))
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.chmod(self._path, 0o600)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_tokens(
        self,
        access_token: str,
        refresh_token: str,
        user: dict[str, Any] | None = None,
    ) -> None:
        data = self._read()
        data["access_token"] = access_token
        data["refresh_token"] = refresh_token
        if user:
            data["user"] = user
        self._write(data)

    @property
    def access_token(self) -> str | None:
        return self._read().get("access_token")

    @property
    def refresh_token(self) -> str | None:
        return self._read().get("refresh_token")

    @property
    def user(self) -> dict[str, Any] | None:
        return self._read().get("user")

    def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
            log.info("token_store_cleared", path=str(self._path))

    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def current_user(self) -> AuthUser | None:
        data = self._read()
        if data.get("user"):
            return AuthUser.from_api(data["user"])

        token = data.get("access_token")
        if not token:
            return None
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError:
            return None
        user_id = claims.get("sub") or claims.get("id")
        if not user_id:
            return None
        return AuthUser(
            id=str(user_id),
            email=claims.get("email"),
            full_name=claims.get("fullName"),
            role=claims.get("role", "CUSTOMER"),
        )
