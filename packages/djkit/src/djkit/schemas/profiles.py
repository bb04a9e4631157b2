"""Saved client booking details."""

from .requests import CamelModel


class ClientProfile(CamelModel):
    """Reusable booking details, keyed by client name."""

    client_name: str = ""
    dj_name: str = ""
    event_date: str = ""
    venue: str = ""
    total_cost: str = ""
    deposit_amount: str = ""
    deposit_due_date: str = ""
    payment_methods: str = ""
    event_start_time: str = ""
    event_end_time: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "clientName": "Alice & Sam",
                "djName": "DJ Nova",
                "eventDate": "2026-06-12",
                "venue": "The Glasshouse, 12 River Rd",
                "totalCost": "2400",
                "depositAmount": "600",
                "depositDueDate": "2026-01-15",
                "paymentMethods": "Bank transfer, Card",
                "eventStartTime": "17:00",
                "eventEndTime": "23:00",
            }
        }


__all__ = ["ClientProfile"]
