"""Translation of Supabase client failures into tracker errors."""

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError

from calorie_tracker.domain.errors import BackendUnavailable, Conflict, NotFound

_logger = logging.getLogger(__name__)

FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"


def execute(query: Any, action: str) -> Any:
    """Run a PostgREST query builder and map failures to typed errors."""
    try:
        return query.execute()
    except APIError as exc:
        if exc.code == FOREIGN_KEY_VIOLATION:
            raise NotFound(f"{action}: referenced record does not exist") from exc
        if exc.code == UNIQUE_VIOLATION:
            raise Conflict(f"{action}: {exc.message}") from exc
        _logger.exception("Supabase request failed", extra={"action": action})
        raise BackendUnavailable(f"{action} failed: {exc.message}") from exc
    except httpx.HTTPError as exc:
        _logger.exception("Supabase unreachable", extra={"action": action})
        raise BackendUnavailable(f"{action} failed: backend unreachable") from exc
