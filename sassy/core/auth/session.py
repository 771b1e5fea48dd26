"""Signed cookie sessions.

The whole session lives in one client-held cookie; nothing is stored
server-side. A ``SessionManager`` is built once by the app factory and reused
for every request. Each request gets its own ``CookieSession`` handle, which
is only written back to the response after ``save()`` or ``destroy()``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from flask import current_app, request
from itsdangerous import BadData, TimestampSigner, URLSafeTimedSerializer

from sassy.core.auth.permissions import Role

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "sassy-web-cookie"
SESSION_MAX_AGE_SECONDS = 60 * 60 * 24 * 7
SESSION_SALT = "sassy-session"
MIN_SECRET_LENGTH = 32
# Only ever used when APP_ENV=development and no secret is configured.
DEV_FALLBACK_SECRET = "dev-secret-password-32-chars-minimum-required"[:MIN_SECRET_LENGTH]

_ENVIRON_KEY = "sassy.session"
_SAVE = "save"
_DESTROY = "destroy"


class SessionConfigError(RuntimeError):
    """Raised when the session secret is missing outside development."""


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: str
    role: Role

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SessionUser":
        user_id, name = data["id"], data["name"]
        if not isinstance(user_id, str) or not isinstance(name, str):
            raise TypeError("session user id and name must be strings")
        return cls(id=user_id, name=name, role=Role(data["role"]))


@dataclass(frozen=True)
class CookiePolicy:
    name: str = SESSION_COOKIE_NAME
    max_age: int = SESSION_MAX_AGE_SECONDS
    secure: bool = False
    http_only: bool = True
    same_site: str = "Lax"


@dataclass(frozen=True)
class SessionSettings:
    secret: str
    cookie: CookiePolicy


def resolve_secret(secret: Optional[str], environment: str) -> str:
    """Validate the configured cookie secret.

    A missing secret is only tolerated in development, where a fixed and
    clearly insecure key keeps local setups working. Short secrets are
    accepted with a warning.
    """
    if not secret:
        if environment == "development":
            logger.warning(
                "Using development fallback cookie secret. Set SECRET_COOKIE_PASSWORD for production."
            )
            return DEV_FALLBACK_SECRET
        raise SessionConfigError("SECRET_COOKIE_PASSWORD environment variable is required")
    if len(secret) < MIN_SECRET_LENGTH:
        logger.warning(
            "SECRET_COOKIE_PASSWORD should be at least %d characters for security",
            MIN_SECRET_LENGTH,
        )
    return secret


def settings_from_config(config: Mapping[str, Any]) -> SessionSettings:
    environment = (config.get("ENV") or "development").lower()
    secret = resolve_secret(config.get("SECRET_COOKIE_PASSWORD"), environment)
    return SessionSettings(
        secret=secret,
        cookie=CookiePolicy(secure=environment == "production"),
    )


class _ClockSigner(TimestampSigner):
    """Timestamp signer reading time from an injectable clock."""

    def __init__(self, *args, clock: Callable[[], float] = time.time, **kwargs):
        super().__init__(*args, **kwargs)
        self._clock = clock

    def get_timestamp(self) -> int:
        return int(self._clock())


class CookieSession:
    """Per-request session handle."""

    def __init__(self, user: Optional[SessionUser] = None):
        self.user = user
        self._pending: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    @property
    def pending(self) -> Optional[str]:
        return self._pending

    def save(self) -> None:
        """Persist the current contents into the response cookie."""
        self._pending = _SAVE

    def destroy(self) -> None:
        """Clear the cookie so the next request is anonymous."""
        self.user = None
        self._pending = _DESTROY

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"isLoggedIn": self.is_logged_in}
        if self.user is not None:
            payload["user"] = self.user.to_dict()
        return payload


class SessionManager:
    """Encodes, decodes and attaches the session cookie."""

    def __init__(self, settings: SessionSettings, clock: Callable[[], float] = time.time):
        self.settings = settings
        self._serializer = URLSafeTimedSerializer(
            settings.secret,
            salt=SESSION_SALT,
            signer=_ClockSigner,
            signer_kwargs={"clock": clock},
        )

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], clock: Callable[[], float] = time.time
    ) -> "SessionManager":
        return cls(settings_from_config(config), clock=clock)

    @property
    def cookie(self) -> CookiePolicy:
        return self.settings.cookie

    def init_app(self, app) -> None:
        app.extensions["session_manager"] = self
        app.after_request(self._write_cookie)

    def encode(self, session: CookieSession) -> str:
        return self._serializer.dumps(session.to_payload())

    def decode(self, value: Optional[str]) -> CookieSession:
        """Rebuild a session from a cookie value; anything invalid is anonymous."""
        if not value:
            return CookieSession()
        try:
            payload = self._serializer.loads(value, max_age=self.cookie.max_age)
        except BadData as exc:
            # Covers tampering, expiry and undecodable payloads.
            logger.debug("Discarding invalid session cookie: %s", exc.__class__.__name__)
            return CookieSession()
        user_data = payload.get("user") if isinstance(payload, dict) else None
        if not user_data:
            return CookieSession()
        try:
            return CookieSession(SessionUser.from_dict(user_data))
        except (KeyError, TypeError, ValueError):
            logger.debug("Discarding session cookie with malformed user record")
            return CookieSession()

    def get_session(self) -> CookieSession:
        """Return the current request's session handle, decoding it on first use."""
        session = request.environ.get(_ENVIRON_KEY)
        if session is None:
            session = self.decode(request.cookies.get(self.cookie.name))
            request.environ[_ENVIRON_KEY] = session
        return session

    def _write_cookie(self, response):
        session: Optional[CookieSession] = request.environ.get(_ENVIRON_KEY)
        if session is None or session.pending is None:
            return response
        policy = self.cookie
        if session.pending == _DESTROY:
            response.delete_cookie(
                policy.name,
                secure=policy.secure,
                httponly=policy.http_only,
                samesite=policy.same_site,
            )
        else:
            response.set_cookie(
                policy.name,
                self.encode(session),
                max_age=policy.max_age,
                secure=policy.secure,
                httponly=policy.http_only,
                samesite=policy.same_site,
            )
        return response


def get_session() -> CookieSession:
    """Session handle for the current request."""
    return current_app.extensions["session_manager"].get_session()
