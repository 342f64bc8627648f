import logging
import os
from typing import List, Optional

import httpx

from translingo.core.errors import (
    NetworkError,
    ServerReportedError,
    UnexpectedResponse,
)
from translingo.models.translation import GatewayResponse, parse_gateway_response

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY_URL = "http://localhost:3000"


def get_gateway_url() -> str:
    return os.getenv("TRANSLINGO_GATEWAY_URL", DEFAULT_GATEWAY_URL)


class GatewayClient:
    def __init__(self, base_url: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or get_gateway_url()).rstrip("/")
        self.transport = transport

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            async with httpx.AsyncClient(base_url=self.base_url,
                                         transport=self.transport) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Client error: {e}")
            raise NetworkError() from e

        if not response.is_success:
            try:
                data = response.json()
            except ValueError:
                data = {}
            if not isinstance(data, dict):
                data = {}
            logger.error(f"Server error: {data or response.text}")
            raise ServerReportedError(
                response.status_code,
                data.get("error") or "Translation failed",
                data.get("details"),
            )
        return response

    async def languages(self) -> dict:
        response = await self._request("GET", "/languages")
        return response.json()

    async def translate(self, text: str, source: str,
                        targets: List[str]) -> GatewayResponse:
        # 单语言时发送字符串，多语言时发送列表
        to = targets[0] if len(targets) == 1 else list(targets)
        response = await self._request(
            "POST", "/translate",
            json={"text": text, "from": source, "to": to},
        )
        try:
            data = response.json()
        except ValueError:
            data = None
        parsed = parse_gateway_response(data, targets)
        if parsed is None:
            raise UnexpectedResponse()
        return parsed
