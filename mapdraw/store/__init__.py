"""Feature stores."""

from mapdraw.store.vector_source import FeatureAddedEvent, VectorSource

__all__ = ["FeatureAddedEvent", "VectorSource"]
