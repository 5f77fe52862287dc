"""
Pydantic schemas for name endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AddNameRequest(BaseModel):
    # Gender and length rules live in validation.py so every entry point shares them.
    name: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)
    origin: str | None = None


class RandomNamesResponse(BaseModel):
    names: list[str]
    gender: str
    count: int
    origin: str | None = None


class StatsResponse(BaseModel):
    stats: list[tuple[str, int]]


class MessageResponse(BaseModel):
    message: str
