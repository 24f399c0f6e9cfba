from __future__ import annotations

from google import genai
from google.genai import types

from creator_growth.ai.config import GenerationConfig


class GeminiProvider:
    name = "google"

    def __init__(self, model: str, api_key: str, config: GenerationConfig):
        self._model = model
        self._config = config
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("GOOGLE_API_KEY is missing")

        self._client = genai.Client(
            api_key=key,
            http_options=types.HttpOptions(timeout=int(config.timeout_s * 1000)),
        )

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=user_prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=self._config.temperature,
                max_output_tokens=self._config.max_output_tokens,
            ),
        )
        return response.text or ""
