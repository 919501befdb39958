"""Reference corpus loading and manifest extraction."""

from .config import CorpusConfig
from .corpus import CorpusSnapshot, CorpusUnavailableError, ReferenceCorpus
from .manifest import extract_manifest, load_world_content, write_manifest

__all__ = [
    "CorpusConfig",
    "CorpusSnapshot",
    "CorpusUnavailableError",
    "ReferenceCorpus",
    "extract_manifest",
    "load_world_content",
    "write_manifest",
]
