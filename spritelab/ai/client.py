"""
OpenAI Images Client

Thin async wrapper around the OpenAI image generation endpoint.

The API key is passed in explicitly (see spritelab.config.Settings).
"""

import asyncio
import base64
import binascii
import logging
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from spritelab.ai.prompts import GenerationMode, build_prompt
from spritelab.errors import ConfigurationError, UpstreamError


logger = logging.getLogger(__name__)


@dataclass
class ImageResult:
    """Result from an image generation call."""
    png: bytes
    model: str
    latency_ms: float


class OpenAIImageClient:
    """
    Async client for the OpenAI Images API.

    Usage:
        async with OpenAIImageClient(api_key=settings.openai_api_key) as client:
            result = await client.generate("a small knight", mode="sheet")
            Path("sheet.png").write_bytes(result.png)
    """

    BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = "gpt-image-1"
    DEFAULT_SIZE = "1024x1024"

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        size: Optional[str] = None,
        base_url: Optional[str] = None,
        max_retries: int = 2,
        retry_delay: float = 1.0,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: OpenAI API key. Required.
            model: Image model. Defaults to gpt-image-1.
            size: Requested output size. Defaults to 1024x1024.
            base_url: API root, for proxies or compatible services.
            max_retries: Maximum attempts for transient errors.
            retry_delay: Base delay between retries (exponential backoff).
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).

        Raises:
            ConfigurationError: If no API key is given.
        """
        if not api_key:
            raise ConfigurationError("Missing OPENAI_API_KEY")

        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.size = size or self.DEFAULT_SIZE
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._transport = transport

        self._client: Optional[httpx.AsyncClient] = None
        self._request_count = 0

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _build_request_body(self, prompt: str, mode: GenerationMode) -> dict:
        """Build the request body for the API."""
        return {
            "model": self.model,
            "prompt": build_prompt(prompt, mode),
            "background": "transparent",
            "size": self.size,
        }

    async def generate(self, prompt: str, mode: GenerationMode = "sheet") -> ImageResult:
        """
        Generate one image for a prompt.

        Args:
            prompt: The user's character concept.
            mode: "concept" for a single preview, "sheet" for a 5x5 grid.

        Returns:
            ImageResult with the decoded PNG bytes.

        Raises:
            UpstreamError: For non-success responses, missing image data,
                or transient failures that outlast the retry budget.
        """
        client = await self._get_client()
        url = f"{self.base_url}/images/generations"
        body = self._build_request_body(prompt, mode)

        last_error: Optional[Exception] = None

        for attempt in range(self.max_retries):
            is_last = attempt == self.max_retries - 1
            delay = self.retry_delay * (2 ** attempt)
            try:
                start_time = time.perf_counter()
                response = await client.post(url, json=body)
                latency_ms = (time.perf_counter() - start_time) * 1000

                if response.is_success:
                    return self._parse_response(response.json(), latency_ms)

                error = UpstreamError(
                    f"OpenAI error ({response.status_code}): {response.text}",
                    response.status_code,
                    response.text,
                )
                if response.status_code != 429 and response.status_code < 500:
                    # Client error - don't retry
                    raise error

                last_error = error
                if not is_last:
                    logger.warning(
                        f"OpenAI returned {response.status_code}, retrying in {delay:.1f}s (attempt {attempt + 1})"
                    )
                    await asyncio.sleep(delay)

            except httpx.TimeoutException:
                last_error = UpstreamError("OpenAI request timed out")
                if not is_last:
                    logger.warning(f"Request timeout, retrying in {delay:.1f}s (attempt {attempt + 1})")
                    await asyncio.sleep(delay)

            except httpx.RequestError as e:
                last_error = UpstreamError(f"OpenAI request error: {e}")
                if not is_last:
                    logger.warning(f"Request error: {e}, retrying in {delay:.1f}s")
                    await asyncio.sleep(delay)

        # All retries exhausted
        if last_error:
            raise last_error
        raise UpstreamError("Failed after all retries")

    def _parse_response(self, data: dict, latency_ms: float) -> ImageResult:
        """Parse the API response into an ImageResult."""
        items = data.get("data") or []
        b64 = items[0].get("b64_json") if items and isinstance(items[0], dict) else None
        if not b64:
            raise UpstreamError("No b64_json returned", 200, str(data)[:500])

        try:
            png = base64.b64decode(b64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise UpstreamError(f"Invalid b64_json returned: {e}", 200) from e

        self._request_count += 1
        logger.info(f"Generated image with {self.model} in {latency_ms:.0f}ms ({len(png)} bytes)")

        return ImageResult(png=png, model=self.model, latency_ms=latency_ms)

    @property
    def request_count(self) -> int:
        """Total number of images returned."""
        return self._request_count
