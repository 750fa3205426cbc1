"""Relay configuration with environment variable loading.

Pydantic-based configuration for the LLM completion relay.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "Reply to user message with proper answer."


class RelayConfig(BaseModel):
    """Configuration for the completion relay.

    Attributes:
        api_key: API key for model access.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        system_prompt: Fixed system instruction sent with every message.
        temperature: Sampling temperature (None = provider default).
        max_tokens: Maximum tokens in generated response (None = provider default).
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GPT_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o"),
        description="Model to use",
    )
    system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System instruction preceding the user message",
    )
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int | None = Field(
        default=None,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set GPT_API_KEY or OPENAI_API_KEY in .env"
            )
        return v.strip()


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return RelayConfig()


def check_relay_config() -> bool:
    """Report at startup whether the relay can reach the provider.

    A missing key is only logged; the relay still starts and answers every
    chat request with the 500 error payload until a key is configured.

    Returns:
        True if the configuration is valid.
    """
    try:
        config = get_relay_config()
    except ValueError as e:
        logger.warning(f"Relay is not configured, chat requests will fail: {e}")
        return False

    logger.info(f"Relay configured for model {config.model_name}")
    return True
