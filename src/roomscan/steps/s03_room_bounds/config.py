"""Configuration for Step 03: Room bounds."""

from pydantic import BaseModel


class RoomBoundsConfig(BaseModel):
    """Bounds are a plain min/max fold over plane footprints; there are no tunables."""
