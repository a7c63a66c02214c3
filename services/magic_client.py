"""
HTTP client for the remote code-generation service
"""
from typing import Optional, Any, Dict
import logging

import httpx
from pydantic import ValidationError

from config.settings import MAGIC_API_URL, MAGIC_VARIATIONS_URL, MAGIC_HEALTH_URL
from models.component import GenerationRequest, RemoteGenerationResponse, VariationsResponse

logger = logging.getLogger(__name__)


class MagicClient:
    """
    One POST per generation. Non-2xx responses, transport errors and bodies
    that do not match the expected schema are all reported as None. No timeout
    is set beyond the transport default.
    """

    def __init__(
        self,
        api_url: Optional[str] = MAGIC_API_URL,
        variations_url: Optional[str] = MAGIC_VARIATIONS_URL,
        health_url: Optional[str] = MAGIC_HEALTH_URL,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_url = api_url
        self.variations_url = variations_url
        self.health_url = health_url
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.api_url)

    async def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        try:
            if self._client is not None:
                response = await self._client.request(method, url, json=payload)
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    response = await client.request(method, url, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Remote generation service returned {e.response.status_code} for {url}")
        except httpx.RequestError as e:
            logger.warning(f"Could not reach remote generation service at {url}: {e}")
        except ValueError as e:
            logger.warning(f"Remote generation service sent a non-JSON body from {url}: {e}")
        return None

    @staticmethod
    def _payload(request: GenerationRequest) -> Dict[str, Any]:
        return {
            "prompt": request.prompt,
            "searchQuery": request.search_query,
            "currentFile": request.current_file_path,
        }

    async def generate(self, request: GenerationRequest) -> Optional[RemoteGenerationResponse]:
        if not self.api_url:
            return None

        data = await self._request("POST", self.api_url, self._payload(request))
        if data is None:
            return None

        try:
            return RemoteGenerationResponse.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Remote generation response did not match the expected schema: {e}")
            return None

    async def generate_variations(self, request: GenerationRequest, count: int) -> Optional[VariationsResponse]:
        if not self.variations_url:
            return None

        payload = self._payload(request)
        payload["count"] = count
        data = await self._request("POST", self.variations_url, payload)
        if data is None:
            return None

        try:
            return VariationsResponse.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Variations response did not match the expected schema: {e}")
            return None

    async def probe(self) -> bool:
        """True when the health endpoint answers with a 2xx."""
        if not self.health_url:
            return False
        return await self._request("GET", self.health_url) is not None
