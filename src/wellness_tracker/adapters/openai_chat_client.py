"""OpenAI chat completions client for meal parsing."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from wellness_tracker.services.llm import ChatClient


@dataclass
class OpenAIChatClient(ChatClient):
    """Chat client backed by the OpenAI chat completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, base_url: str | None = None) -> "OpenAIChatClient":
        """Create a chat client; failed calls are never retried."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        )

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Send a chat completion request and return the first message text."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            raise RuntimeError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise RuntimeError("OpenAI returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
