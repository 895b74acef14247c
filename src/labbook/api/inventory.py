"""/inventory routes: lab and NGS stock, projects, run plans, transactions, alerts."""

from __future__ import annotations

from typing import Any

from labbook.api.base import CrudResource, Resource, clean


class LabInventoryAPI(CrudResource):
    path = "/inventory/lab"


class NgsInventoryAPI(CrudResource):
    path = "/inventory/ngs"


class ProjectsAPI(CrudResource):
    path = "/inventory/projects"


class RunPlansAPI(CrudResource):
    path = "/inventory/runs"


class TransactionsAPI(Resource):
    async def get_all(self, params: dict | None = None) -> Any:
        return await self._client.get("/inventory/transactions", params=clean(params))


class ConsumptionAPI(Resource):
    async def consume(self, data: dict) -> Any:
        """Record stock consumption; the backend deducts quantities."""
        return await self._client.post("/inventory/consume", json=data)


class InventoryAlertsAPI(Resource):
    async def get_all(self) -> Any:
        return await self._client.get("/inventory/alerts")

    async def resolve(self, alert_id: int) -> Any:
        return await self._client.put(f"/inventory/alerts/{alert_id}/resolve")
