"""Shared type aliases for the core and domain layers."""
from typing import Literal

IVVariant = Literal["bane", "neutral", "boon"]
CostType = Literal["dew", "stones"]

__all__ = ["CostType", "IVVariant"]
