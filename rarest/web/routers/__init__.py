from .corpus import router as corpus_router
from .rarest import router as rarest_router
from .system import router as system_router

__all__ = [
    "corpus_router",
    "rarest_router",
    "system_router",
]
