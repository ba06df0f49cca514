"""Rides domain API package."""

from rides.api.routes import ride_router

__all__ = ["ride_router"]
