"""Shared pytest fixtures for polyglotflow tests.

Provides mock executors and translators, isolated managers and agents,
and common test data.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

import polyglotflow.i18n as i18n
import polyglotflow.utils.config as config_module
from polyglotflow.agents import BaseExecutor, ExecutionError, PolyglotAgent
from polyglotflow.core.models import CulturalProfile, MultilingualCommand, SupportedLanguage
from polyglotflow.i18n.manager import LanguageManager
from polyglotflow.mt import BaseTranslator, TaggingTranslator, TranslationContext, TranslationError
from polyglotflow.rules import get_base_profile
from polyglotflow.utils.config import Settings

# ============================================================================
# Mock Collaborators
# ============================================================================


class MockExecutor(BaseExecutor):
    """Executor returning a fixed response and recording every call."""

    def __init__(self, response: str = "Task completed") -> None:
        self.response = response
        self.call_count = 0
        self.commands: list[MultilingualCommand] = []
        self.profiles: list[CulturalProfile | None] = []

    async def execute(
        self, command: MultilingualCommand, profile: CulturalProfile | None = None
    ) -> str:
        self.call_count += 1
        self.commands.append(command)
        self.profiles.append(profile)
        return self.response


class FailingExecutor(BaseExecutor):
    """Executor that always fails."""

    async def execute(
        self, command: MultilingualCommand, profile: CulturalProfile | None = None
    ) -> str:
        raise ExecutionError(f"Cannot execute '{command.intent}'")


class RecordingTranslator(TaggingTranslator):
    """Tagging translator counting its calls."""

    def __init__(self) -> None:
        self.call_count = 0
        self.contexts: list[TranslationContext] = []

    async def translate(self, text: str, context: TranslationContext) -> str:
        self.call_count += 1
        self.contexts.append(context)
        return await super().translate(text, context)


class FailingTranslator(BaseTranslator):
    """Translator failing for selected target languages and tagging the rest."""

    def __init__(self, failing: Iterable[SupportedLanguage]) -> None:
        self.failing = set(failing)
        self._tagger = TaggingTranslator()

    async def translate(self, text: str, context: TranslationContext) -> str:
        if context.target_language in self.failing:
            raise TranslationError(f"No route to {context.target_language.value}")
        return await self._tagger.translate(text, context)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide default settings that ignore any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def mock_executor() -> MockExecutor:
    """Provide an executor answering "Task completed"."""
    return MockExecutor()


@pytest.fixture
def failing_executor() -> FailingExecutor:
    """Provide an executor that always raises ExecutionError."""
    return FailingExecutor()


@pytest.fixture
def recording_translator() -> RecordingTranslator:
    """Provide a tagging translator that counts calls."""
    return RecordingTranslator()


@pytest.fixture
def failing_translator_class() -> type[FailingTranslator]:
    """Provide FailingTranslator class for tests choosing the failing languages.

    Example:
        def test_failure(failing_translator_class):
            translator = failing_translator_class([SupportedLanguage.JA])
    """
    return FailingTranslator


@pytest.fixture
def manager(test_settings: Settings) -> LanguageManager:
    """Provide a language manager with private caches."""
    return LanguageManager(settings=test_settings)


@pytest.fixture
def agent(mock_executor: MockExecutor, test_settings: Settings) -> PolyglotAgent:
    """Provide an agent with a mock executor and isolated caches."""
    return PolyglotAgent(executor=mock_executor, settings=test_settings)


@pytest.fixture
def en_profile() -> CulturalProfile:
    """Provide the English base profile."""
    return get_base_profile(SupportedLanguage.EN)


@pytest.fixture
def ja_profile() -> CulturalProfile:
    """Provide the Japanese base profile."""
    return get_base_profile(SupportedLanguage.JA)


@pytest.fixture
def fresh_globals(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the process-wide settings, manager and analyzer."""
    monkeypatch.setattr(config_module, "_settings", None)
    monkeypatch.setattr(i18n, "_manager", None)
    monkeypatch.setattr(i18n, "_analyzer", None)


# ============================================================================
# Pytest Configuration Hooks
# ============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Modify test collection to auto-mark tests based on location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests",
    )


def pytest_runtest_setup(item: pytest.Item) -> None:
    """Skip slow tests unless --run-slow is specified."""
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("Slow tests skipped (use --run-slow to run)")
