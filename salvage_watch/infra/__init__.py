"""Infra layer utilities (state storage)."""

from .storage import VehicleStateFile

__all__ = ["VehicleStateFile"]
