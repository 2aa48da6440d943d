"""Stage timeline event helpers for page pipeline diagnostics."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def domain_build_stage_event(
    stage: str,
    status: str,
    details: dict[str, Any] | None = None,
    error_code: str | None = None,
) -> dict[str, object]:
    """Build one structured timeline event payload.

    Args:
        stage: Pipeline stage name (`route`, `access`, `manifest`, `resolve`, `render`).
        status: Stage status marker.
        details: Optional structured details object.
        error_code: Optional failure code for `failed` events.

    Returns:
        dict[str, object]: Structured timeline event.
    """

    event_payload: dict[str, object] = {
        "stage": stage,
        "status": status,
        "at_utc": datetime.now(timezone.utc).isoformat(),
    }
    if error_code is not None:
        event_payload["error_code"] = error_code
    if details is not None:
        event_payload["details"] = details
    return event_payload
