import logging
from typing import List, Optional

import httpx
from fastapi import Depends

from translingo.core.config import Settings, get_settings
from translingo.core.errors import ServerError, UpstreamError

logger = logging.getLogger(__name__)


class AzureTranslator:
    """Client for the Azure Translator v3 REST API.

    Every call opens its own ``httpx.AsyncClient``; nothing is shared between
    requests except the read-only settings.
    """

    def __init__(self, settings: Settings,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    @property
    def headers(self) -> dict:
        return {
            "Ocp-Apim-Subscription-Key": self.settings.subscription_key or "",
            "Ocp-Apim-Subscription-Region": self.settings.region or "",
        }

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self.settings.endpoint}{path}"
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.request(method, url, **kwargs)
            except httpx.HTTPError as e:
                logger.error(f"Request to {url} failed: {e}")
                raise ServerError(str(e)) from e

        logger.info(f"Azure API response status: {response.status_code}")
        if not response.is_success:
            logger.error(f"Azure API error: {response.text}")
            raise UpstreamError(response.status_code, response.text)
        return response

    async def languages(self) -> dict:
        response = await self._send(
            "GET",
            "/languages",
            params={"api-version": self.settings.api_version},
            headers=self.headers,
        )
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Unreadable languages body: {e}")
            raise ServerError(str(e)) from e

    async def translate(self, text: str, targets: List[str],
                        source: Optional[str] = None) -> List[dict]:
        """Translate ``text`` into every code of ``targets`` in one call.

        Returns the provider's ``translations`` list (``{text, to}`` items),
        which may be empty.
        """
        params = [("api-version", self.settings.api_version)]
        params += [("to", code) for code in targets]
        if source:
            params.append(("from", source))

        response = await self._send(
            "POST",
            "/translate",
            params=params,
            headers={**self.headers, "Content-Type": "application/json"},
            json=[{"Text": text}],
        )
        try:
            data = response.json()
            if not data:
                return []
            translations = data[0].get("translations") or []
            if not isinstance(translations, list):
                raise TypeError(f"translations is {type(translations).__name__}")
            if not all(isinstance(t, dict) for t in translations):
                raise TypeError("translation items must be objects")
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            # 2xx 但响应体无法解析
            logger.error(f"Unreadable translate body: {e}")
            raise ServerError(str(e)) from e
        return translations


def get_translator(settings: Settings = Depends(get_settings)) -> AzureTranslator:
    return AzureTranslator(settings)
