"""Pydantic request/response schemas for the Rides API."""

from datetime import datetime

from pydantic import BaseModel


class RequestRideRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"pickup_location": "12 Harbour Road", "dropoff_location": "Central Station"}]
        }
    }

    pickup_location: str
    dropoff_location: str


class RideStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ACCEPTED"}]}}

    status: str


class RideResponse(BaseModel):
    id: str
    customer_id: str
    customer_email: str | None = None
    driver_id: str | None = None
    pickup_location: str
    dropoff_location: str
    fare: float
    status: str
    requested_at: datetime | None = None
    completed_at: datetime | None = None

    @classmethod
    def from_ride(cls, ride) -> "RideResponse":
        return cls(
            id=str(ride.id),
            customer_id=str(ride.customer_id),
            customer_email=ride.customer_email,
            driver_id=str(ride.driver_id) if ride.driver_id else None,
            pickup_location=ride.pickup_location,
            dropoff_location=ride.dropoff_location,
            fare=ride.fare,
            status=ride.status,
            requested_at=ride.requested_at,
            completed_at=ride.completed_at,
        )


class RidePageResponse(BaseModel):
    items: list[RideResponse]
    total: int
    page: int
    size: int
    total_pages: int
