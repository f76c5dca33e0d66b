"""Dispatch outcome models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Why a dispatch did not complete."""

    CHANNEL_NOT_FOUND = "channel_not_found"
    SEND_FAILED = "send_failed"


class DispatchResult(BaseModel):
    """Summary of one dispatch request.

    ``sender`` names the sender class that acted (``None`` when no sender
    was resolved).  ``detail`` is a human-readable error description.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    channel_type: str
    notified_count: int = 0
    error: ErrorKind | None = None
    sender: str | None = None
    detail: str | None = None

    @classmethod
    def channel_not_found(cls, channel_type: str) -> DispatchResult:
        return cls(
            ok=False,
            channel_type=channel_type,
            error=ErrorKind.CHANNEL_NOT_FOUND,
            detail=f"Invalid notification type: {channel_type}",
        )

    @classmethod
    def send_failed(
        cls, channel_type: str, sender: str, reason: str
    ) -> DispatchResult:
        return cls(
            ok=False,
            channel_type=channel_type,
            error=ErrorKind.SEND_FAILED,
            sender=sender,
            detail=f"Send via {channel_type} failed: {reason}",
        )
