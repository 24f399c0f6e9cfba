from __future__ import annotations

from anthropic import AsyncAnthropic

from creator_growth.ai.config import GenerationConfig


class ClaudeProvider:
    name = "anthropic"

    def __init__(self, model: str, api_key: str, config: GenerationConfig):
        self._model = model
        self._config = config
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("ANTHROPIC_API_KEY is missing")

        self._client = AsyncAnthropic(
            api_key=key,
            timeout=config.timeout_s,
            max_retries=config.max_retries,
        )

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        message = await self._client.messages.create(
            model=self._model,
            max_tokens=self._config.max_output_tokens,
            temperature=self._config.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        parts = [getattr(block, "text", "") for block in message.content]
        return "".join(part for part in parts if part)
