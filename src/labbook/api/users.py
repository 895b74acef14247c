"""/user routes for the signed-in user."""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource, clean


class UserAPI(Resource):
    async def get_profile(self) -> Any:
        return await self._client.get("/user/profile")

    async def update_profile(self, data: dict) -> Any:
        return await self._client.put("/user/profile", json=data)

    async def change_password(self, current_password: str, new_password: str) -> Any:
        return await self._client.put(
            "/user/change-password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )

    async def upload_image(self, files: dict) -> Any:
        """``files`` is an httpx multipart mapping, e.g. ``{"image": ("me.jpg", fh, "image/jpeg")}``."""
        return await self._client.post("/user/upload-image", files=files)

    async def delete_image(self) -> Any:
        return await self._client.delete("/user/delete-image")

    async def get_dashboard(self) -> Any:
        return await self._client.get("/user/dashboard")

    async def get_productivity_report(self, params: dict | None = None) -> Any:
        return await self._client.get("/user/productivity-report", params=clean(params))
