"""
services/auth.py — Login, registration and session bookkeeping.

A successful login or registration stores the token pair and the user
profile in the client's TokenStore; logout only clears the local session.
"""

from __future__ import annotations

from notary_shared.models import (
    AuthSession,
    AuthUser,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
)
from notary_client.services.base import BaseService


class AuthService(BaseService):
    name = "auth"
    resource = "/auth"

    def _store(self, session: AuthSession) -> AuthSession:
        user = session.user.model_dump(mode="json", by_alias=True) if session.user else None
        self._api.tokens.set_tokens(session.access_token, session.refresh_token, user)
        self._api.cache.clear()
        return session

    async def login(self, email: str, password: str) -> AuthSession:
        body = LoginRequest(email=email, password=password)
        session = self._one(AuthSession, await self._api.post(self._path("login"), self._payload(body)))
        self._log.info("login_succeeded", user_id=session.user.id if session.user else None)
        return self._store(session)

    async def register(self, data: RegisterRequest) -> AuthSession:
        session = self._one(
            AuthSession, await self._api.post(self._path("register"), self._payload(data))
        )
        self._log.info("register_succeeded", user_id=session.user.id if session.user else None)
        return self._store(session)

    async def change_password(self, old_password: str, new_password: str) -> None:
        body = ChangePasswordRequest(old_password=old_password, new_password=new_password)
        await self._api.post(self._path("change-password"), self._payload(body))

    def logout(self) -> None:
        self._api.tokens.clear()
        self._api.cache.clear()

    def current_user(self) -> AuthUser | None:
        return self._api.tokens.current_user()
