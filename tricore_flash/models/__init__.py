"""Shared Pydantic models."""

from .base import TricoreFlashBaseModel
from .results import BaseResult


__all__ = ["TricoreFlashBaseModel", "BaseResult"]
