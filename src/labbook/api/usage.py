"""/usage routes — lab usage sessions started from an approved booking."""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource, clean


class UsageAPI(Resource):
    async def start_session(self, booking_id: int) -> Any:
        return await self._client.post("/usage/start", json={"booking_id": booking_id})

    async def end_session(self, session_id: int, notes: str | None = None) -> Any:
        return await self._client.post("/usage/end", json={"session_id": session_id, "notes": notes})

    async def get_my_sessions(self, params: dict | None = None) -> Any:
        return await self._client.get("/usage/my-sessions", params=clean(params))

    async def get_all(self, params: dict | None = None) -> Any:
        return await self._client.get("/usage", params=clean(params))

    async def get_by_equipment(self, equipment_id: int, params: dict | None = None) -> Any:
        return await self._client.get(f"/usage/equipment/{equipment_id}", params=clean(params))
