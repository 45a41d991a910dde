"""Bearer tokens: HS256 JWTs whose subject is the identity provider's user ID."""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from hrm.config import JwtConfig
from hrm.domain.shared.service import Service

logger = logging.getLogger(__name__)

# Set by the service; extra claims may not override them
RESERVED_CLAIMS = frozenset({"sub", "aud", "iat", "exp", "jti"})


class TokenService(Service):
    """Issues and verifies access tokens.

    In production tokens come from the identity provider and only
    ``validate_access_token`` is used; ``create_access_token`` backs the
    development ``hrm token issue`` command and the tests.
    """

    _config: JwtConfig

    def create_access_token(
        self,
        external_user_id: str,
        additional_claims: dict[str, Any] | None = None,
    ) -> str:
        """Sign a token for ``external_user_id``.

        Extra claims such as ``name``, ``email`` or ``unsafe_metadata`` ride
        along; reserved registered claims in ``additional_claims`` raise
        ValueError.
        """
        extra = dict(additional_claims or {})
        clashing = RESERVED_CLAIMS & extra.keys()
        if clashing:
            raise ValueError(f"Reserved claims cannot be overridden: {sorted(clashing)}")

        issued_at = datetime.now(UTC)
        lifetime = timedelta(minutes=self._config.access_token_expire_minutes)
        claims = {
            **extra,
            "sub": external_user_id,
            "aud": self._config.audience,
            "iat": issued_at,
            "exp": issued_at + lifetime,
            "jti": secrets.token_hex(16),
        }
        logger.debug("Issuing access token for %s (expires %s)", external_user_id, claims["exp"])
        return jwt.encode(claims, self._config.secret, algorithm=self._config.algorithm)

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Decode ``token`` after checking signature, audience and expiry.

        Raises the PyJWT errors (``ExpiredSignatureError``,
        ``InvalidTokenError`` and subclasses) unchanged; callers decide how to
        report them.
        """
        return jwt.decode(
            token,
            self._config.secret,
            algorithms=[self._config.algorithm],
            audience=self._config.audience,
            options={"require": ["sub", "exp"]},
        )
