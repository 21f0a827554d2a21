"""Caller identity resolved by the upstream identity collaborator."""

from uuid import UUID

from fastapi import Header, HTTPException, status


async def require_user(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller id injected by the gateway as X-User-Id."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from exc
