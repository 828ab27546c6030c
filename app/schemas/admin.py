"""Schemas for the admin dashboard."""

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    """Total row counts shown on the admin dashboard."""

    users: int = Field(..., description="Total users")
    stores: int = Field(..., description="Total stores")
    ratings: int = Field(..., description="Total ratings")
