from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KnowledgeBase:
    """Static technical document injected verbatim into every prompt.

    Loaded once at startup and shared read-only by all requests.
    """

    text: str = ""
    source: Path | None = None

    @property
    def loaded(self) -> bool:
        return bool(self.text)

    @property
    def characters(self) -> int:
        return len(self.text)


def _read_text(path: Path) -> str:
    raw_bytes = path.read_bytes()
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        # latin-1 decodes any byte sequence.
        return raw_bytes.decode("latin-1")


def load_knowledge_base(candidates: Iterable[Path]) -> KnowledgeBase:
    """Return the first readable candidate, or an empty knowledge base.

    A missing or unreadable file is not fatal: the service keeps answering
    without technical context.
    """
    searched: list[Path] = []
    for path in candidates:
        searched.append(path)
        if not path.is_file():
            continue
        try:
            text = _read_text(path)
        except OSError as exc:
            logger.warning("Could not read knowledge base at %s: %s", path, exc)
            continue

        logger.info("Knowledge base loaded from %s (%d characters)", path, len(text))
        return KnowledgeBase(text=text, source=path)

    logger.warning(
        "Knowledge base not found; continuing without technical context. Searched: %s",
        ", ".join(str(path) for path in searched) or "<no candidates>",
    )
    return KnowledgeBase()
