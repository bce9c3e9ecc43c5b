"""Result types returned by the generation service.

:class:`RenderedImage` carries serialized image bytes to the HTTP layer.
:class:`ServiceResult` is what CLI commands emit after writing a file.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from brandmark.domain.types import MEDIA_TYPES, ImageFormat

NO_STORE = "no-store"


class RenderedImage(BaseModel):
    """A serialized image plus the headers it should be served with."""

    model_config = {"frozen": True}

    content: bytes
    format: ImageFormat
    cache_control: str = NO_STORE

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self.format]


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a CLI-facing operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"banner"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal notes, e.g. the bundled-font fallback.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
