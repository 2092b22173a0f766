"""Configuration for Step 02: Plane clustering."""

from pydantic import BaseModel


class ClusteringConfig(BaseModel):
    """Clustering groups purely by structural label; there are no tunables."""
