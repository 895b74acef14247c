"""/activity routes: activity feed, notifications, print logs and the lab logbook."""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource, clean


class ActivityAPI(Resource):
    async def get_my_activity(self, params: dict | None = None) -> Any:
        return await self._client.get("/activity/my-activity", params=clean(params))

    async def get_all(self, params: dict | None = None) -> Any:
        return await self._client.get("/activity/all", params=clean(params))

    async def get_notifications(self, params: dict | None = None) -> Any:
        return await self._client.get("/activity/notifications", params=clean(params))

    async def mark_notification_read(self, notification_id: int) -> Any:
        return await self._client.put(f"/activity/notifications/{notification_id}/read")

    async def add_print_log(self, data: dict) -> Any:
        return await self._client.post("/activity/print-logs", json=data)

    async def get_my_print_logs(self, params: dict | None = None) -> Any:
        return await self._client.get("/activity/my-print-logs", params=clean(params))

    async def get_logbook(self, params: dict | None = None) -> Any:
        return await self._client.get("/activity/logbook", params=clean(params))

    async def sign_in(self) -> Any:
        return await self._client.post("/activity/sign-in")

    async def sign_out(self) -> Any:
        return await self._client.post("/activity/sign-out")
