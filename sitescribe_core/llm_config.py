#!/usr/bin/env python3
"""
LLMConfig - provider configuration for the command planner

Supported providers:
- openai/gpt-4o-mini (default), openai/gpt-4o
- anthropic/claude-3-haiku-20240307
- groq/llama3-70b-8192
- deepseek/deepseek-chat
- ollama/qwen2.5:7b (local)

Usage:
    llm_config = LLMConfig(provider="openai/gpt-4o-mini", api_token="sk-...")
    llm_config = LLMConfig(provider="anthropic/claude-3-haiku-20240307")  # Uses env var
    llm_config = LLMConfig(provider="groq/llama3-70b-8192", api_token="env:MY_GROQ_KEY")
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


# Provider to environment variable mapping
PROVIDER_ENV_VARS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "groq": "GROQ_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "ollama": None,  # Ollama doesn't need API key
}

# Provider to base URL mapping
PROVIDER_BASE_URLS = {
    "openai": "https://api.openai.com/v1",
    "anthropic": "https://api.anthropic.com",
    "groq": "https://api.groq.com/openai/v1",
    "deepseek": "https://api.deepseek.com/v1",
    "ollama": "http://localhost:11434",
}

# Default models per provider
DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-haiku-20240307",
    "groq": "llama3-70b-8192",
    "deepseek": "deepseek-chat",
    "ollama": "qwen2.5:7b",
}


@dataclass
class LLMConfig:
    """
    Planner LLM configuration.

    Parameters:
        provider: Format "provider/model" e.g. "openai/gpt-4o-mini", "ollama/llama3"
        api_token: Optional. If not provided, reads from environment variable based on provider.
                   Can also use "env:VAR_NAME" format to specify custom env var.
        base_url: Optional. Custom API endpoint for the provider.
        temperature: LLM temperature (0.0-1.0)
        max_tokens: Maximum tokens to generate
        timeout: Request timeout in seconds
        extra_params: Additional provider-specific parameters
    """
    provider: str = "openai/gpt-4o-mini"
    api_token: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.1
    max_tokens: int = 2048
    timeout: int = 300
    top_p: float = 0.9
    extra_params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        parts = self.provider.split("/", 1)
        self._provider_name = parts[0].lower()
        self._model_name = parts[1] if len(parts) > 1 else DEFAULT_MODELS.get(self._provider_name, "")

        self._resolved_token = self._resolve_api_token()

        if self.base_url is None:
            self.base_url = PROVIDER_BASE_URLS.get(self._provider_name, PROVIDER_BASE_URLS["openai"])

    def _resolve_api_token(self) -> Optional[str]:
        """Resolve API token from explicit value, env:VAR reference or provider default."""
        if self.api_token is None:
            env_var = PROVIDER_ENV_VARS.get(self._provider_name)
            if env_var:
                return os.getenv(env_var)
            return None

        if self.api_token.startswith("env:"):
            env_var = self.api_token[4:].strip()
            return os.getenv(env_var)

        return self.api_token

    @property
    def provider_name(self) -> str:
        return self._provider_name

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def resolved_api_token(self) -> Optional[str]:
        return self._resolved_token

    @property
    def is_local(self) -> bool:
        return self._provider_name == "ollama"

    @property
    def requires_api_key(self) -> bool:
        return self._provider_name != "ollama"

    def validate(self) -> bool:
        """Raise ValueError when a hosted provider has no API token."""
        if self._provider_name not in PROVIDER_BASE_URLS:
            raise ValueError(
                f"Unknown provider: {self._provider_name}. "
                f"Supported: {', '.join(sorted(PROVIDER_BASE_URLS))}"
            )
        if self.requires_api_key and not self._resolved_token:
            env_var = PROVIDER_ENV_VARS.get(self._provider_name, "unknown")
            raise ValueError(
                f"API token required for {self._provider_name}. "
                f"Set api_token or {env_var} environment variable."
            )
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view without the token itself"""
        return {
            "provider": self.provider,
            "provider_name": self._provider_name,
            "model_name": self._model_name,
            "base_url": self.base_url,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "timeout": self.timeout,
            "has_api_token": self._resolved_token is not None,
            "is_local": self.is_local,
        }

    @classmethod
    def from_env(cls, prefix: str = "SITESCRIBE") -> "LLMConfig":
        """
        Create LLMConfig from environment variables.

        Reads:
            {prefix}_LLM_PROVIDER (default openai/gpt-4o-mini)
            {prefix}_LLM_API_TOKEN
            {prefix}_LLM_BASE_URL
            {prefix}_TEMPERATURE
            {prefix}_NUM_PREDICT (max_tokens)
            {prefix}_LLM_TIMEOUT
        """
        return cls(
            provider=os.getenv(f"{prefix}_LLM_PROVIDER", "openai/gpt-4o-mini"),
            api_token=os.getenv(f"{prefix}_LLM_API_TOKEN"),
            base_url=os.getenv(f"{prefix}_LLM_BASE_URL"),
            temperature=float(os.getenv(f"{prefix}_TEMPERATURE", "0.1")),
            max_tokens=int(os.getenv(f"{prefix}_NUM_PREDICT", "2048")),
            timeout=int(os.getenv(f"{prefix}_LLM_TIMEOUT", "300")),
        )
