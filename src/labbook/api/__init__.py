"""Resource wrappers over ApiClient, one class per backend area."""

from __future__ import annotations

from labbook.api.activity import ActivityAPI
from labbook.api.admin import AdminAPI
from labbook.api.auth import AuthAPI
from labbook.api.bookings import BookingAPI
from labbook.api.equipment import EquipmentAPI
from labbook.api.inventory import (
    ConsumptionAPI,
    InventoryAlertsAPI,
    LabInventoryAPI,
    NgsInventoryAPI,
    ProjectsAPI,
    RunPlansAPI,
    TransactionsAPI,
)
from labbook.api.usage import UsageAPI
from labbook.api.users import UserAPI
from labbook.client import ApiClient

__all__ = [
    "LabbookAPI",
    "ActivityAPI", "AdminAPI", "AuthAPI", "BookingAPI", "EquipmentAPI", "UsageAPI", "UserAPI",
    "ConsumptionAPI", "InventoryAlertsAPI", "LabInventoryAPI", "NgsInventoryAPI",
    "ProjectsAPI", "RunPlansAPI", "TransactionsAPI",
]


class LabbookAPI:
    """Every resource wrapper bound to one client."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.auth = AuthAPI(client)
        self.user = UserAPI(client)
        self.equipment = EquipmentAPI(client)
        self.bookings = BookingAPI(client)
        self.usage = UsageAPI(client)
        self.activity = ActivityAPI(client)
        self.admin = AdminAPI(client)
        self.lab_inventory = LabInventoryAPI(client)
        self.ngs_inventory = NgsInventoryAPI(client)
        self.projects = ProjectsAPI(client)
        self.run_plans = RunPlansAPI(client)
        self.transactions = TransactionsAPI(client)
        self.consumption = ConsumptionAPI(client)
        self.inventory_alerts = InventoryAlertsAPI(client)
