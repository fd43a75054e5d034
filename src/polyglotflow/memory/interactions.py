# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Interaction log for processed requests.

Every request handled by the polyglot agent is recorded as a
PolyglotMemoryEntry in the log of its language. The default log lives in
process memory only.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from polyglotflow.core.models import CulturalProfile, SupportedLanguage

logger = logging.getLogger(__name__)

MAX_TAGS = 5
MIN_TAG_LENGTH = 5


def _new_entry_id() -> str:
    return f"poly-{uuid.uuid4().hex[:12]}"


def extract_tags(text: str) -> list[str]:
    """Pick categorization tags from text: the first words longer than four characters."""
    words = [word for word in text.lower().split() if len(word) >= MIN_TAG_LENGTH]
    return words[:MAX_TAGS]


class PolyglotMemoryEntry(BaseModel):
    """One recorded interaction."""

    id: str = Field(default_factory=_new_entry_id, description="Entry identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    language: SupportedLanguage = Field(..., description="Language of the interaction")
    original_content: str = Field(..., description="Raw user input")
    translations: dict[SupportedLanguage, str] = Field(
        default_factory=dict, description="Responses by language"
    )
    cultural_context: CulturalProfile | None = None
    cultural_notes: str | None = Field(default=None, description="Communication style applied")
    tags: list[str] = Field(default_factory=list)


class InteractionLog(ABC):
    """Abstract base class for interaction logs."""

    @abstractmethod
    async def append(self, entry: PolyglotMemoryEntry) -> None:
        """Record an interaction."""
        ...

    @abstractmethod
    async def recent(
        self, language: SupportedLanguage, limit: int = 10
    ) -> list[PolyglotMemoryEntry]:
        """Get the latest interactions in a language, oldest first.

        Args:
            language: Language to filter by
            limit: Maximum number of entries

        Returns:
            Up to limit entries
        """
        ...


class InMemoryInteractionLog(InteractionLog):
    """Interaction log kept in process memory, per language."""

    def __init__(self) -> None:
        self._entries: defaultdict[SupportedLanguage, list[PolyglotMemoryEntry]] = defaultdict(
            list
        )

    async def append(self, entry: PolyglotMemoryEntry) -> None:
        self._entries[entry.language].append(entry)
        logger.debug(f"Logged interaction {entry.id} ({entry.language.value})")

    async def recent(
        self, language: SupportedLanguage, limit: int = 10
    ) -> list[PolyglotMemoryEntry]:
        if limit <= 0:
            return []
        return list(self._entries.get(language, [])[-limit:])

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())
