"""/equipment routes. Create and update are multipart so an image can ride along."""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource, clean


class EquipmentAPI(Resource):
    async def get_all(self, params: dict | None = None) -> Any:
        return await self._client.get("/equipment", params=clean(params))

    async def get_by_id(self, equipment_id: int) -> Any:
        return await self._client.get(f"/equipment/{equipment_id}")

    async def create(self, data: dict, files: dict | None = None) -> Any:
        return await self._client.post("/equipment", data=data, files=files)

    async def update(self, equipment_id: int, data: dict, files: dict | None = None) -> Any:
        return await self._client.put(f"/equipment/{equipment_id}", data=data, files=files)

    async def delete(self, equipment_id: int) -> Any:
        return await self._client.delete(f"/equipment/{equipment_id}")

    async def upload_image(self, equipment_id: int, files: dict) -> Any:
        return await self._client.post(f"/equipment/{equipment_id}/upload-image", files=files)

    async def delete_image(self, equipment_id: int) -> Any:
        return await self._client.delete(f"/equipment/{equipment_id}/delete-image")

    async def get_analytics(self, equipment_id: int, params: dict | None = None) -> Any:
        return await self._client.get(f"/equipment/{equipment_id}/analytics", params=clean(params))
