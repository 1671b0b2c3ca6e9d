"""Uploaded files attached to bills, expenses and bank explanations."""

from __future__ import annotations

from datetime import datetime

from freeagent_domain.core.domain.base import FreeAgentModel, ResourceUrl


class Attachment(FreeAgentModel):
    omit_when_none = True

    url: ResourceUrl | None = None
    filename: str | None = None
    content_type: str | None = None
    size: int | None = None
    description: str | None = None
    created_at: datetime | None = None
