"""Shared plumbing for the resource wrappers."""

from __future__ import annotations

from typing import Any

from labbook.client import ApiClient


class Resource:
    """One backend area; methods map one-to-one onto backend routes."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client


class CrudResource(Resource):
    """List/get/create/update/delete over a single collection path."""

    path: str = ""

    async def get_all(self, params: dict | None = None) -> Any:
        return await self._client.get(self.path, params=clean(params))

    async def get_by_id(self, item_id: int) -> Any:
        return await self._client.get(f"{self.path}/{item_id}")

    async def create(self, data: dict) -> Any:
        return await self._client.post(self.path, json=data)

    async def update(self, item_id: int, data: dict) -> Any:
        return await self._client.put(f"{self.path}/{item_id}", json=data)

    async def delete(self, item_id: int) -> Any:
        return await self._client.delete(f"{self.path}/{item_id}")


def clean(params: dict | None) -> dict | None:
    """Drop unset query parameters."""
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None}
