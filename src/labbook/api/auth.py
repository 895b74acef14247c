"""/auth routes."""

from __future__ import annotations

from typing import Any

from labbook.api.base import Resource


class AuthAPI(Resource):
    async def login(self, email: str, password: str) -> Any:
        return await self._client.post("/auth/login", json={"email": email, "password": password})

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: str | None = None,
        department: str | None = None,
    ) -> Any:
        payload: dict = {"name": name, "email": email, "password": password}
        if phone:
            payload["phone"] = phone
        if department:
            payload["department"] = department
        return await self._client.post("/auth/register", json=payload)

    async def logout(self) -> Any:
        return await self._client.post("/auth/logout")

    async def verify_token(self) -> Any:
        return await self._client.get("/auth/verify")

    async def forgot_password(self, email: str, client_type: str = "mobile") -> Any:
        """The backend tailors the reset link to ``client_type`` ("mobile" or "web")."""
        return await self._client.post(
            "/auth/forgot-password",
            json={"email": email},
            headers={"X-Client-Type": client_type},
        )

    async def reset_password(self, token: str, new_password: str) -> Any:
        return await self._client.post("/auth/reset-password", json={"token": token, "newPassword": new_password})
