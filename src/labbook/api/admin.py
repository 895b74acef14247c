"""/admin routes. All analytics are computed by the backend."""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource, clean


class AdminAPI(Resource):
    async def get_dashboard(self) -> Any:
        return await self._client.get("/admin/dashboard")

    async def get_equipment_utilization(self) -> Any:
        return await self._client.get("/admin/equipment-utilization")

    async def get_user_productivity(self) -> Any:
        return await self._client.get("/admin/user-productivity")

    async def get_booking_analytics(self) -> Any:
        return await self._client.get("/admin/booking-analytics")

    async def get_all_users(self, params: dict | None = None) -> Any:
        return await self._client.get("/admin/users", params=clean(params))

    async def toggle_user_status(self, user_id: int) -> Any:
        return await self._client.put(f"/admin/users/{user_id}/toggle-status")

    async def get_machine_utilization_analytics(self, params: dict | None = None) -> Any:
        return await self._client.get("/admin/machine-analytics", params=clean(params))

    async def get_peak_hours_analysis(self) -> Any:
        return await self._client.get("/admin/peak-hours")

    async def get_daily_usage_patterns(self, params: dict | None = None) -> Any:
        return await self._client.get("/admin/daily-patterns", params=clean(params))

    async def get_user_details(self, user_id: int) -> Any:
        return await self._client.get(f"/admin/users/{user_id}/details")

    async def get_lab_logbook(self, params: dict | None = None) -> Any:
        # same route the activity feed uses; admins see every user's entries
        return await self._client.get("/activity/logbook", params=clean(params))
