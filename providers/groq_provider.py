"""
Groq LLM Provider for rule-based complexity counting.

Plain chat-completions call, one non-streaming request per prompt.
"""

from typing import Optional, Any

import httpx


class GroqAPIError(Exception):
    """Exception for Groq API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class GroqProvider:
    """
    Groq LLM provider.

    The API key is not checked here: a missing key is sent without an
    Authorization header and surfaces as a 401 from the API.
    """

    BASE_URL = "https://api.groq.com/openai/v1/chat/completions"
    MODEL = "qwen-2.5-coder-32b"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.1,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Groq provider.

        Args:
            api_key: Bearer credential (usually GROQ_API_KEY)
            model: Model identifier, defaults to MODEL
            base_url: Chat-completions endpoint, defaults to BASE_URL
            max_tokens: Completion token cap
            temperature: Sampling temperature
            timeout: HTTP timeout in seconds
            client: Pre-built HTTP client; the provider will not close it
        """
        self.api_key = api_key or ""
        self.model = model or self.MODEL
        self.base_url = base_url or self.BASE_URL
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, settings) -> "GroqProvider":
        """Build a provider from application Settings."""
        return cls(
            api_key=settings.GROQ_API_KEY,
            model=settings.GROQ_MODEL,
            base_url=settings.GROQ_BASE_URL,
            max_tokens=settings.MAX_TOKENS,
            temperature=settings.TEMPERATURE,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self._client

    async def close(self):
        """Close HTTP client."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _make_request(
        self,
        messages: list[dict[str, str]],
    ) -> dict[str, Any]:
        """
        Make API request to Groq.

        Args:
            messages: Chat messages

        Returns:
            API response dict

        Raises:
            GroqAPIError: On a non-200 status or a non-JSON body
            httpx.HTTPError: On transport failures
        """
        client = await self._get_client()

        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "stream": False,
        }

        response = await client.post(self.base_url, json=payload, headers=self._headers())

        if response.status_code != 200:
            error_detail = response.text
            try:
                error_json = response.json()
                error_detail = error_json.get("error", {}).get("message", error_detail)
            except (ValueError, AttributeError):
                pass
            raise GroqAPIError(
                f"API error ({response.status_code}): {error_detail}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise GroqAPIError(f"API returned a non-JSON body: {e}", status_code=200)

    async def complete(self, prompt: str) -> str:
        """
        Get a raw text completion from Groq.

        Args:
            prompt: User prompt

        Returns:
            Message content exactly as returned by the model
        """
        messages = [
            {"role": "user", "content": prompt},
        ]

        response = await self._make_request(messages)

        # Extract content
        try:
            content = response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise GroqAPIError(f"Unexpected response structure: missing {e}", status_code=200)

        if content is None:
            raise GroqAPIError("Model returned empty content", status_code=200)

        return content
