"""
AI Client

Thin wrapper around the generative text service. It hands back one
complete Markdown reply per request, or raises AIServiceError with a
message the UI can show as-is.

- Rate limiting (respects free tier limits)
- Provider failures mapped to user-facing messages
- Empty replies rejected before they reach the parsers

Supported Providers (via AI_PROVIDER setting):
- "gemini"      (default) - Google Gemini API, optionally grounded with Google Search
- "openrouter"  - OpenRouter.ai
"""

import asyncio
import logging
import time
from typing import Any

import requests
from google import genai
from google.genai import types

from research_advisor.config import ModelConfig, RateLimitConfig, get_setting
from research_advisor.errors import AIServiceError, EmptyResponseError
from research_advisor.utils.model_router import ModelRouter, TaskType

logger = logging.getLogger(__name__)


# =============================================================================
# ERROR MAPPING
# =============================================================================

AUTH_MESSAGE = (
    "API Error: Could not authenticate. Please ensure your API key is correct "
    "and has the necessary permissions."
)
NETWORK_MESSAGE = (
    "Network Error: Could not connect to the AI service. Please check your "
    "internet connection and try again."
)
RATE_LIMIT_MESSAGE = (
    "Rate Limit Exceeded: You've made too many requests in a short period. "
    "Please wait a moment before trying again."
)
SAFETY_MESSAGE = (
    "Content Safety: Your request was blocked due to safety settings. "
    "Please modify your input and try again."
)

# (substrings of the lower-cased provider message, user message)
_ERROR_CLASSES: list[tuple[tuple[str, ...], str]] = [
    (("api key", "permission denied"), AUTH_MESSAGE),
    (("fetch", "network"), NETWORK_MESSAGE),
    (("429", "rate limit"), RATE_LIMIT_MESSAGE),
    (("content has been blocked", "safety"), SAFETY_MESSAGE),
]


def map_api_error(error: BaseException, context: str) -> AIServiceError:
    """
    Turn a provider exception into an AIServiceError.

    Args:
        error: Whatever the SDK or HTTP layer raised
        context: What was being fetched ("analysis", "paper feedback", ...)
    """
    logger.error(f"Error during AI service call for {context}: {error}")

    if isinstance(error, AIServiceError):
        return error

    message = str(error)
    lowered = message.lower()
    for needles, user_message in _ERROR_CLASSES:
        if any(needle in lowered for needle in needles):
            return AIServiceError(user_message, context)

    if not message:
        return AIServiceError(
            f"Failed to get {context}. An unexpected error occurred. "
            "Please try again later.",
            context,
        )
    return AIServiceError(
        f"An error occurred while fetching the {context}: {message}", context
    )


def require_text(text: str | None, empty_message: str, context: str) -> str:
    """Reject empty replies so the parsers only ever see complete text."""
    if not text or not text.strip():
        raise EmptyResponseError(empty_message, context)
    return text


# =============================================================================
# RATE LIMITING
# =============================================================================

class TokenBucket:
    """
    Token bucket rate limiter.

    Ensures we don't exceed API rate limits.
    """

    def __init__(self, rate: float, capacity: float) -> None:
        """
        Initialize rate limiter.

        Args:
            rate: Tokens per second to add
            capacity: Maximum tokens in bucket
        """
        self.rate = rate
        self.capacity = capacity
        self.tokens = capacity
        self.last_update = time.time()

    async def acquire(self, tokens: int = 1) -> None:
        """Wait until enough tokens are available."""
        while True:
            now = time.time()
            elapsed = now - self.last_update
            self.tokens = min(self.capacity, self.tokens + elapsed * self.rate)
            self.last_update = now

            if self.tokens >= tokens:
                self.tokens -= tokens
                return

            # Wait for tokens to refill
            wait_time = (tokens - self.tokens) / self.rate
            await asyncio.sleep(wait_time)


DEFAULT_RETRY_AFTER = 10
MAX_RETRY_AFTER = 30


def retry_after_seconds(value: str | None) -> int:
    """
    Seconds to wait before the next model, from a Retry-After header.

    Only the delta-seconds form is honoured; an HTTP-date or garbage
    falls back to DEFAULT_RETRY_AFTER. Capped at MAX_RETRY_AFTER.
    """
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        seconds = DEFAULT_RETRY_AFTER
    return max(0, min(seconds, MAX_RETRY_AFTER))


# =============================================================================
# OPENROUTER BACKEND
# =============================================================================

class OpenRouterClient:
    """
    OpenRouter.ai client, drop-in alternative to Gemini.

    Falls back through the router's model list if a model is unavailable.
    """

    BASE_URL = "https://openrouter.ai/api/v1/chat/completions"

    def __init__(self, api_key: str | None = None) -> None:
        api_key = api_key or get_setting("OPENROUTER_API_KEY")
        if not api_key:
            raise AIServiceError(AUTH_MESSAGE, "configuration")

        self._api_key = api_key
        self._router = ModelRouter()
        self._daily_calls = 0

    def _call_api(self, messages: list[dict], models: list[str], temperature: float) -> str:
        """
        Make a synchronous HTTP call to OpenRouter.

        Iterates through the provided models until one succeeds.
        Handles 404 (model not found) and 429 (rate limit) responses.
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        last_error: Exception | None = None
        for try_model in models:
            payload = {
                "model": try_model,
                "messages": messages,
                "temperature": temperature,
            }

            try:
                resp = requests.post(self.BASE_URL, headers=headers, json=payload, timeout=120)
            except requests.RequestException as e:
                last_error = e
                logger.warning(f"Network error with {try_model}: {e}")
                continue

            if resp.status_code == 404:
                logger.warning(f"Model {try_model} not found, trying next...")
                continue

            if resp.status_code == 429:
                last_error = RuntimeError(f"429 rate limit for {try_model}")
                wait = retry_after_seconds(resp.headers.get("Retry-After"))
                logger.warning(f"Model {try_model} rate-limited, trying next after {wait}s...")
                time.sleep(wait)
                continue

            if resp.status_code in (401, 403):
                raise RuntimeError(f"Permission denied: invalid API key ({resp.status_code})")

            resp.raise_for_status()
            data = resp.json()

            if try_model != models[0]:
                logger.info(f"Fallback: used {try_model} instead of {models[0]}")

            return data["choices"][0]["message"]["content"] or ""

        raise RuntimeError(f"All models exhausted. Last error: {last_error}")

    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: str,
        temperature: float,
        context: str,
        empty_message: str,
        task_type: TaskType = TaskType.REASONING,
        use_search: bool = False,
    ) -> str:
        """Generate one complete Markdown reply. OpenRouter has no search grounding."""
        if use_search:
            logger.debug(f"Search grounding unavailable on OpenRouter for {context}")
        candidates = self._router.get_candidate_models(task_type)
        messages = [
            {"role": "system", "content": system_instruction},
            {"role": "user", "content": prompt},
        ]

        try:
            text = await asyncio.to_thread(self._call_api, messages, candidates, temperature)
        except Exception as e:
            raise map_api_error(e, context) from e

        self._daily_calls += 1
        return require_text(text, empty_message, context)

    def get_usage_stats(self) -> dict[str, Any]:
        return {
            "daily_calls": self._daily_calls,
            "provider": "openrouter",
        }


# =============================================================================
# GEMINI BACKEND
# =============================================================================

class GeminiClient:
    """
    Gemini API client with rate limiting and error mapping.

    Usage:
        client = GeminiClient()
        markdown = await client.generate_text(
            prompt,
            system_instruction="You are an expert academic research advisor...",
            temperature=0.3,
            context="analysis",
            empty_message="The AI returned an empty response...",
        )
    """

    def __init__(self, api_key: str | None = None, model: str = ModelConfig.MODEL) -> None:
        """Initialize client with API key from arguments, Streamlit secrets or environment."""
        self._model = model

        api_key = api_key or get_setting("GOOGLE_API_KEY") or get_setting("API_KEY")
        if not api_key:
            logger.warning(
                "GOOGLE_API_KEY not set. "
                "Gemini API calls will fail."
            )
            self._client = None
        else:
            self._client = genai.Client(api_key=api_key)

        self._limiter = TokenBucket(
            rate=RateLimitConfig.RPM / 60,  # Per second
            capacity=RateLimitConfig.RPM,
        )
        self._daily_calls = 0

    def _check_daily_limit(self) -> bool:
        return self._daily_calls < RateLimitConfig.DAILY

    @staticmethod
    def _build_config(
        system_instruction: str,
        temperature: float,
        use_search: bool,
    ) -> types.GenerateContentConfig:
        config_params: dict[str, Any] = {
            "system_instruction": system_instruction,
            "temperature": temperature,
        }
        if use_search:
            config_params["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        return types.GenerateContentConfig(**config_params)

    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: str,
        temperature: float,
        context: str,
        empty_message: str,
        task_type: TaskType = TaskType.REASONING,
        use_search: bool = False,
    ) -> str:
        """
        Generate one complete Markdown reply.

        Args:
            prompt: The user prompt
            system_instruction: Persona / formatting instruction
            temperature: Sampling temperature
            context: What is being fetched, used in error messages
            empty_message: Message raised when the reply has no text
            task_type: Unused by Gemini; kept for interface parity
            use_search: Ground the reply with Google Search results

        Raises:
            AIServiceError: On any provider failure
            EmptyResponseError: When the reply is empty
        """
        if self._client is None:
            raise map_api_error(RuntimeError("API key not configured"), context)

        if not self._check_daily_limit():
            logger.warning(f"Daily limit of {RateLimitConfig.DAILY} requests reached")
            raise AIServiceError(RATE_LIMIT_MESSAGE, context)

        await self._limiter.acquire()

        config = self._build_config(system_instruction, temperature, use_search)
        try:
            response = await asyncio.to_thread(
                self._client.models.generate_content,
                model=self._model,
                contents=prompt,
                config=config,
            )
            self._daily_calls += 1
            text = response.text
        except Exception as e:
            raise map_api_error(e, context) from e

        return require_text(text, empty_message, context)

    def get_usage_stats(self) -> dict[str, Any]:
        """Get current usage statistics."""
        return {
            "daily_calls": self._daily_calls,
            "model": self._model,
            "provider": "gemini",
        }


# =============================================================================
# CLIENT FACTORY
# =============================================================================

# Global client instance
_client: GeminiClient | OpenRouterClient | None = None


def get_ai_client() -> GeminiClient | OpenRouterClient:
    """
    Get or create the global AI client.

    Selects provider based on the AI_PROVIDER setting:
    - "openrouter" -> OpenRouterClient
    - "gemini" (default) -> GeminiClient
    """
    global _client
    if _client is None:
        provider = get_setting("AI_PROVIDER", "gemini").lower().strip()

        if provider == "openrouter":
            logger.info("Using OpenRouter AI provider")
            _client = OpenRouterClient()
        else:
            logger.info("Using Gemini AI provider")
            _client = GeminiClient()
    return _client
