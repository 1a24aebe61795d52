import logging
from typing import Optional, Any
from .llm import SimpleOllama
from .llm_config import LLMConfig

logger = logging.getLogger(__name__)


def setup_llm(llm_config: Optional[LLMConfig] = None) -> Any:
    """
    Create the planner LLM client.

    Args:
        llm_config: Optional LLMConfig. If not provided, reads SITESCRIBE_* env vars (LLMConfig.from_env).

    Returns:
        LLM client instance with ainvoke() method
    """
    if llm_config is None:
        llm_config = LLMConfig.from_env()
    return create_llm_client(llm_config)


def create_llm_client(llm_config: LLMConfig) -> Any:
    """
    Create an async client for the configured provider.

    - ollama: local Ollama server (SimpleOllama)
    - openai, groq, deepseek: OpenAI-compatible chat completions
    - anthropic: Anthropic messages API
    """
    llm_config.validate()
    provider = llm_config.provider_name
    logger.debug(f"Creating LLM client for {provider}/{llm_config.model_name}")

    if provider == "ollama":
        return SimpleOllama(
            base_url=llm_config.base_url or "http://localhost:11434",
            model=llm_config.model_name,
            num_ctx=llm_config.extra_params.get("num_ctx", 8192),
            num_predict=llm_config.max_tokens,
            temperature=llm_config.temperature,
            top_p=llm_config.top_p,
            timeout=llm_config.timeout,
        )
    if provider == "anthropic":
        return AnthropicClient(
            api_key=llm_config.resolved_api_token,
            model=llm_config.model_name,
            temperature=llm_config.temperature,
            max_tokens=llm_config.max_tokens,
            timeout=llm_config.timeout,
        )
    if provider in ("openai", "groq", "deepseek"):
        return OpenAICompatibleClient(
            api_key=llm_config.resolved_api_token,
            base_url=llm_config.base_url,
            model=llm_config.model_name,
            temperature=llm_config.temperature,
            max_tokens=llm_config.max_tokens,
            timeout=llm_config.timeout,
        )
    raise ValueError(f"Unknown provider: {provider}")


class OpenAICompatibleClient:
    """
    OpenAI-compatible async client.
    Works with OpenAI, Groq, DeepSeek and other OpenAI-compatible APIs.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        temperature: float = 0.1,
        max_tokens: int = 2048,
        timeout: int = 300,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    async def ainvoke(self, prompt: str, system: Optional[str] = None) -> dict:
        import aiohttp

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout_obj) as session:
            async with session.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=payload
            ) as resp:
                if resp.status != 200:
                    error_text = await resp.text()
                    raise RuntimeError(f"API error {resp.status}: {error_text}")
                data = await resp.json()

        text = data.get("choices", [{}])[0].get("message", {}).get("content", "")
        return {"text": text}


class AnthropicClient:
    """Anthropic Claude async client"""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-haiku-20240307",
        temperature: float = 0.1,
        max_tokens: int = 2048,
        timeout: int = 300,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    async def ainvoke(self, prompt: str, system: Optional[str] = None) -> dict:
        import aiohttp

        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": "2023-06-01",
            "Content-Type": "application/json",
        }

        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            payload["system"] = system

        timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout_obj) as session:
            async with session.post(
                "https://api.anthropic.com/v1/messages",
                headers=headers,
                json=payload
            ) as resp:
                if resp.status != 200:
                    error_text = await resp.text()
                    raise RuntimeError(f"Anthropic API error {resp.status}: {error_text}")
                data = await resp.json()

        content = data.get("content", [])
        text = content[0].get("text", "") if content else ""
        return {"text": text}
