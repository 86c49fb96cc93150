import datetime
import hashlib
import secrets
from typing import Any, Optional

from jose import JWTError, jwt

from ..domain.auth import TokenClaims
from ..domain.user import User
from ..logging_config import get_logger
from ..metrics import TOKEN_OPERATIONS

logger = get_logger(__name__)

ALGORITHM = "HS256"


class TokenService:
    """Issues and verifies the bearer tokens handed out at sign-in.

    Revocations are recorded in an optional key-value store so a signed-out
    token stops verifying before it expires.
    """

    def __init__(self, jwt_secret: str, access_token_ttl_seconds: int = 3600, store: Any = None):
        self.jwt_secret = jwt_secret
        self.access_token_ttl_seconds = access_token_ttl_seconds
        self.store = store

    def get_token_hash(self, token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def create_access_token(
        self,
        claims: TokenClaims,
        expires_delta: Optional[datetime.timedelta] = None,
    ) -> str:
        payload = claims.to_payload()
        # every token is distinct, so revoking one never hits a later sign-in
        payload.setdefault("jti", secrets.token_urlsafe(16))

        now = datetime.datetime.now(datetime.timezone.utc)
        if expires_delta is not None:
            expire = now + expires_delta
        elif claims.expires_at is not None:
            expire = claims.expires_at
        else:
            expire = now + datetime.timedelta(seconds=self.access_token_ttl_seconds)

        payload["exp"] = expire
        payload.setdefault("iat", int(now.timestamp()))

        encoded: str = jwt.encode(payload, self.jwt_secret, algorithm=ALGORITHM)
        if TOKEN_OPERATIONS is not None:
            TOKEN_OPERATIONS.labels(operation="generate").inc()
        return encoded

    def issue_for(self, user: User) -> str:
        return self.create_access_token(TokenClaims(subject=user.id, role=user.role))

    def verify_token(self, token: str) -> TokenClaims:
        # signature and expiry only; revocation needs the async store
        payload = jwt.decode(token, self.jwt_secret, algorithms=[ALGORITHM])
        if TOKEN_OPERATIONS is not None:
            TOKEN_OPERATIONS.labels(operation="verify").inc()
        return TokenClaims.from_payload(payload)

    async def verify_active_token(self, token: str) -> TokenClaims:
        """Verify ``token`` and reject it if it was revoked."""
        claims = self.verify_token(token)
        if self.store is not None:
            revoked = await self.store.get(f"revoked:{self.get_token_hash(token)}")
            if revoked:
                raise JWTError("token revoked")
        return claims

    async def revoke(self, token: str) -> bool:
        if self.store is None:
            return False
        await self.store.set(
            f"revoked:{self.get_token_hash(token)}", "1", ex=self.access_token_ttl_seconds
        )
        if TOKEN_OPERATIONS is not None:
            TOKEN_OPERATIONS.labels(operation="revoke").inc()
        logger.debug("token_revoked")
        return True
