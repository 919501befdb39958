"""Dependency composition root."""

from __future__ import annotations

from dataclasses import dataclass

from rarest.application import RarestItemsApplicationService
from rarest.data import ReferenceCorpus


@dataclass(frozen=True)
class AppContainer:
    """Wired application dependencies."""

    corpus: ReferenceCorpus
    rarest: RarestItemsApplicationService


_CONTAINER: AppContainer | None = None


def get_container() -> AppContainer:
    global _CONTAINER
    if _CONTAINER is not None:
        return _CONTAINER

    corpus = ReferenceCorpus.from_env()
    _CONTAINER = AppContainer(
        corpus=corpus,
        rarest=RarestItemsApplicationService(corpus=corpus),
    )
    return _CONTAINER
