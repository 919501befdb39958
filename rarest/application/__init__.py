"""Application layer services."""

from .rarest_service import RarestItemsApplicationService, category_labels

__all__ = [
    "RarestItemsApplicationService",
    "category_labels",
]
