"""Edamam food-database API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FoodDatabaseClient(Protocol):
    """Interface for hosted food-database lookups."""

    async def parse_ingredient(self, ingredient: str) -> dict[str, object]:
        """Parse free-text ingredient and return raw API data."""


@dataclass
class HttpxEdamamClient(FoodDatabaseClient):
    """HTTPX-backed Edamam food-database client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, app_id: str, app_key: str, base_url: str) -> "HttpxEdamamClient":
        """Create an Edamam client with a managed httpx session and no timeout."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(timeout=None),
        )

    async def parse_ingredient(self, ingredient: str) -> dict[str, object]:
        """Call the parser endpoint for an ingredient description."""
        url = f"{self.base_url}/parser"
        response = await self.http_client.get(
            url,
            params={
                "app_id": self.app_id,
                "app_key": self.app_key,
                "ingr": ingredient,
            },
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
