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


"""Base abstract class for command executors.

The executor performs the actual business action behind a parsed command.
It is supplied by the application; the pipeline only prepares the command and
the cultural profile, and adapts whatever text comes back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from polyglotflow.core.models import CulturalProfile, MultilingualCommand, SupportedLanguage


class BaseExecutor(ABC):
    """Abstract base class for executors."""

    @abstractmethod
    async def execute(
        self, command: MultilingualCommand, profile: CulturalProfile | None = None
    ) -> str:
        """Execute a parsed command.

        Args:
            command: Parsed command with intent and entities
            profile: Cultural profile of the requester, when known

        Returns:
            Response text

        Raises:
            ExecutionError: If execution fails
        """
        ...


class AgentError(Exception):
    """Base exception for agent-related errors."""

    pass


class ExecutionError(AgentError):
    """Raised by executors when a command cannot be carried out."""

    pass


class MultilingualResponseError(AgentError):
    """Raised when one or more translations of a multilingual response failed.

    Attributes:
        failures: Exception raised for each failed language
        partial: Responses that did succeed, primary language included
    """

    def __init__(
        self,
        failures: dict[SupportedLanguage, BaseException],
        partial: dict[SupportedLanguage, str],
    ) -> None:
        self.failures = failures
        self.partial = partial
        languages = ", ".join(language.value for language in failures)
        super().__init__(f"Translation failed for: {languages}")
