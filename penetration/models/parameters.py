"""Placement parameters and configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field


DEFAULT_CLEARANCE = 0.16  # Native length units of the host model


class PlacementParams(BaseModel):
    """User-adjustable parameters for opening placement."""
    clearance: float = Field(DEFAULT_CLEARANCE, gt=0)  # Added to each opening dimension


class PlacementConfig(BaseModel):
    """Controls how a run is executed and how results are labelled for the host."""
    max_workers: int = Field(1, ge=1)     # 1 = serial
    tolerance: float = Field(1e-9, gt=0)  # Degenerate checks and proximity clamping
    width_parameter: str = "Width"        # Host parameter receiving the opening width
    height_parameter: str = "Height"      # Host parameter receiving the opening height
