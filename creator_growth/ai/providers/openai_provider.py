from __future__ import annotations

import os

from openai import AsyncOpenAI

from creator_growth.ai.config import GenerationConfig


class OpenAIProvider:
    name = "openai"

    def __init__(self, model: str, api_key: str, config: GenerationConfig):
        self._model = model
        self._config = config
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(os.getenv("OPENAI_BASE_URL") or None),
            timeout=config.timeout_s,
            max_retries=config.max_retries,
        )

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self._config.temperature,
            max_tokens=self._config.max_output_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
        return content or ""
