"""/bookings routes.

Slot availability and conflict checks happen server-side; the client only
forwards the requested window.
"""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource, clean


class BookingAPI(Resource):
    async def create(
        self,
        equipment_id: int,
        booking_date: str,
        start_time: str,
        end_time: str,
        purpose: str | None = None,
    ) -> Any:
        payload: dict = {
            "equipment_id": equipment_id,
            "booking_date": booking_date,
            "start_time": start_time,
            "end_time": end_time,
        }
        if purpose:
            payload["purpose"] = purpose
        return await self._client.post("/bookings", json=payload)

    async def get_my_bookings(self, params: dict | None = None) -> Any:
        return await self._client.get("/bookings/my-bookings", params=clean(params))

    async def get_all(self, params: dict | None = None) -> Any:
        return await self._client.get("/bookings", params=clean(params))

    async def approve(self, booking_id: int, remarks: str | None = None) -> Any:
        return await self._client.put(f"/bookings/{booking_id}/approve", json={"remarks": remarks})

    async def reject(self, booking_id: int, remarks: str | None = None) -> Any:
        return await self._client.put(f"/bookings/{booking_id}/reject", json={"remarks": remarks})

    async def cancel(self, booking_id: int) -> Any:
        return await self._client.put(f"/bookings/{booking_id}/cancel")

    async def get_available_slots(self, equipment_id: int, date: str) -> Any:
        return await self._client.get(
            "/bookings/available-slots",
            params={"equipment_id": equipment_id, "date": date},
        )
