"""Discord webhook API client: webhook lookup and execution."""

from __future__ import annotations

import logging

import httpx

from tts_bootstrap.catalog.fetcher import decode_response
from tts_bootstrap.models import Webhook, WebhookMessage

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://discord.com/api/v10"


class DiscordWebhookClient:
    """Thin wrapper over the Discord webhook endpoints.

    With a bot token, webhooks are looked up through the bot-authenticated
    ``/webhooks/{id}`` route; otherwise the token route is used and no
    Authorization header is sent.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_base: str = DEFAULT_API_BASE,
        bot_token: str | None = None,
    ) -> None:
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._bot_token = bot_token

    async def fetch_webhook(self, webhook_id: int, token: str) -> Webhook:
        if self._bot_token:
            url = f"{self._api_base}/webhooks/{webhook_id}"
            headers = {"Authorization": f"Bot {self._bot_token}"}
        else:
            url = f"{self._api_base}/webhooks/{webhook_id}/{token}"
            headers = {}

        resp = await self._client.get(url, headers=headers)
        webhook = decode_response(resp, Webhook)
        # The bot route omits the token for webhooks owned by other apps.
        if webhook.token != token:
            webhook = webhook.model_copy(update={"token": token})
        return webhook

    async def execute(
        self, webhook: Webhook, content: str, wait: bool = True,
    ) -> WebhookMessage | None:
        """Post ``content`` through ``webhook``.

        Returns the created message when the platform sends one back, which
        it only does with ``wait=True``.
        """
        url = f"{self._api_base}/webhooks/{webhook.id}/{webhook.token}"
        resp = await self._client.post(
            url,
            params={"wait": "true" if wait else "false"},
            json={"content": content},
        )

        if resp.is_success and (resp.status_code == 204 or not resp.content):
            return None
        return decode_response(resp, WebhookMessage)
