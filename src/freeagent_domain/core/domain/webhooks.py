"""Webhook subscriptions and the payload FreeAgent posts to them."""

from __future__ import annotations

from datetime import datetime

from freeagent_domain.core.domain.base import FreeAgentModel, ResourceUrl


class Webhook(FreeAgentModel):
    url: ResourceUrl | None = None
    events: tuple[str, ...] | None = None
    payload_url: ResourceUrl | None = None
    status: str | None = None
    secret: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def subscribes_to(self, event: str) -> bool:
        return event in (self.events or ())


class WebhookPayload(FreeAgentModel):
    """Body of a webhook notification (`event`, `resource`, `resource_url`)."""

    event: str | None = None
    resource: str | None = None
    resource_url: ResourceUrl | None = None
    timestamp: datetime | None = None
