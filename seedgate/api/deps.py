"""API dependencies for caller identity, gating and seeding."""

from typing import Annotated

import asyncpg
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from seedgate.core.config import Settings, get_settings
from seedgate.core.database import get_db
from seedgate.core.logging_config import security_logger
from seedgate.core.responses import forbidden_response, unauthorized_response
from seedgate.core.security import get_token_subject
from seedgate.services.seeding import Seeder, run_seed
from seedgate.services.users import get_user_by_external_id

# Missing credentials resolve to "no identity" instead of failing inside the scheme.
bearer_scheme = HTTPBearer(auto_error=False)


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


async def resolve_caller_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """
    Resolve the caller identity from the bearer token.

    Returns the token subject, or None when the header is absent or the token
    cannot be verified. Both cases are treated alike by the gates.
    """
    if credentials is None:
        return None
    return get_token_subject(credentials.credentials)


async def require_caller(
    request: Request,
    identity: Annotated[str | None, Depends(resolve_caller_identity)],
) -> str:
    """
    Dependency that rejects requests without a caller identity.

    Raises HTTP 401 ``{"error": "Unauthorized"}``.
    """
    if identity is None:
        security_logger.log_unauthorized_access(
            resource=request.url.path,
            ip_address=_client_ip(request),
            reason="no caller identity",
        )
        unauthorized_response("Unauthorized")
    return identity


def require_development(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Settings:
    """
    Dependency that only lets requests through in the development environment.

    Raises HTTP 403 ``{"error": "Seeding only allowed in development"}``.
    """
    if not settings.is_development:
        security_logger.log_environment_denied(
            resource=request.url.path,
            environment=settings.ENVIRONMENT,
            ip_address=_client_ip(request),
        )
        forbidden_response("Seeding only allowed in development")
    return settings


async def require_admin(
    request: Request,
    identity: Annotated[str, Depends(require_caller)],
    conn: Annotated[asyncpg.Connection, Depends(get_db)],
) -> dict:
    """
    Dependency to require a caller mapped to an admin user.

    Raises HTTP 403 if the caller has no user record or is not an admin.
    """
    user = await get_user_by_external_id(conn, identity)
    if user is None or user.get("role") != "admin":
        security_logger.log_unauthorized_access(
            resource=request.url.path,
            user_id=identity,
            ip_address=_client_ip(request),
            reason="admin role required",
        )
        forbidden_response("Admin access required")
    return user


def get_seeder() -> Seeder:
    """Seeding operation used by the seed routes."""
    return run_seed
