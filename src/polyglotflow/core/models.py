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


"""Core data models for the polyglotflow language pipeline.

This module defines the data structures passed between pipeline stages:
- Supported languages, scripts and the closed enumerations of the cultural model
- Language detection results
- Cultural profiles and business etiquette
- Intent extraction results and multilingual commands
- Orchestrator results and cache statistics
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SupportedLanguage(str, Enum):
    """Languages understood by the pipeline.

    Enumeration order is significant: detection ties are resolved in this order,
    so English wins when the input carries no signal at all.
    """

    EN = "en"  # English (base language)
    RU = "ru"  # Русский
    ZH_CN = "zh-cn"  # 简体中文
    ZH_TW = "zh-tw"  # 繁體中文
    JA = "ja"  # 日本語
    KO = "ko"  # 한국어
    DE = "de"  # Deutsch
    FR = "fr"  # Français
    ES = "es"  # Español
    PT = "pt"  # Português
    TR = "tr"  # Türkçe
    TH = "th"  # ไทย
    IT = "it"  # Italiano
    HI = "hi"  # हिन्दी

    @classmethod
    def parse(cls, code: str | SupportedLanguage) -> SupportedLanguage:
        """Parse a language code into a supported language.

        Accepts any letter case and both separators, e.g. "EN", "zh_CN", "zh-TW".

        Args:
            code: Language code or an existing member

        Returns:
            Matching SupportedLanguage member

        Raises:
            ValueError: If the code is not one of the supported languages
        """
        if isinstance(code, SupportedLanguage):
            return code
        normalized = code.strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(
                f"Unsupported language '{code}'. "
                f"Supported: {', '.join(lang.value for lang in cls)}"
            ) from None


class Script(str, Enum):
    """Writing-system family of a text, independent of its language."""

    LATIN = "latin"
    CYRILLIC = "cyrillic"
    CJK = "cjk"
    ARABIC = "arabic"
    DEVANAGARI = "devanagari"


class FormalityLevel(str, Enum):
    """Register of a text, derived from lexical formality markers."""

    INFORMAL = "informal"
    NEUTRAL = "neutral"
    FORMAL = "formal"
    VERY_FORMAL = "very-formal"

    @property
    def is_formal(self) -> bool:
        """True for formal and very-formal registers."""
        return self in (FormalityLevel.FORMAL, FormalityLevel.VERY_FORMAL)


class CommunicationStyle(str, Enum):
    """Preferred way of conveying a message in business settings."""

    DIRECT = "direct"
    INDIRECT = "indirect"
    CONTEXTUAL = "contextual"


class DecisionMaking(str, Enum):
    """How decisions are usually reached in business settings."""

    INDIVIDUAL = "individual"
    CONSENSUS = "consensus"
    HIERARCHICAL = "hierarchical"


class WritingDirection(str, Enum):
    """Text direction."""

    LTR = "ltr"
    RTL = "rtl"


class PluralRule(str, Enum):
    """Closed set of pluralization rule kinds.

    Rules are selected by kind and evaluated by polyglotflow.cultural.plurals;
    nothing stored in a profile is ever executed.
    """

    ALWAYS_OTHER = "always-other"  # ja, zh, ko, th: no grammatical plural
    ONE_IF_EQUAL_1 = "one-if-equal-1"  # en, de, es, it, tr
    ONE_IF_0_OR_1 = "one-if-0-or-1"  # fr, pt, hi
    EAST_SLAVIC = "east-slavic"  # ru: CLDR one/few/many


class LanguageAlternative(BaseModel):
    """A runner-up language with its share of the detection score."""

    model_config = ConfigDict(frozen=True)

    language: SupportedLanguage = Field(..., description="Candidate language")
    confidence: float = Field(..., description="Score share (0.0-1.0)", ge=0.0, le=1.0)


class DetectionResult(BaseModel):
    """Result of language detection.

    Confidence is the winner's share of the summed scores and is 0.0 when no
    language scored at all. A zero-confidence result is still well-formed:
    callers must check confidence rather than treat it as a failure.
    """

    model_config = ConfigDict(frozen=True)

    language: SupportedLanguage = Field(..., description="Winning language")
    confidence: float = Field(..., description="Winner score share (0.0-1.0)", ge=0.0, le=1.0)
    alternatives: tuple[LanguageAlternative, ...] = Field(
        default=(),
        description="Up to three runner-up languages, best first",
        max_length=3,
    )
    script: Script = Field(default=Script.LATIN, description="Detected writing system")

    @model_validator(mode="after")
    def _check_alternatives(self) -> DetectionResult:
        if any(alt.language == self.language for alt in self.alternatives):
            raise ValueError("alternatives must not contain the winning language")
        scores = [alt.confidence for alt in self.alternatives]
        if scores != sorted(scores, reverse=True):
            raise ValueError("alternatives must be sorted by descending confidence")
        return self


class BusinessEtiquette(BaseModel):
    """Business communication norms of a culture."""

    greeting_style: str = Field(..., description="Customary greeting")
    communication_style: CommunicationStyle
    decision_making: DecisionMaking


class CulturalProfile(BaseModel):
    """Resolved locale formatting rules and etiquette norms for one request.

    Base profiles are static; analysis always works on a deep copy.
    """

    language: SupportedLanguage
    region: str = Field(..., description="Region code (e.g., 'US', 'JP')")
    timezone: str = Field(..., description="IANA timezone name")
    date_format: str = Field(..., description="Date template with YYYY/MM/DD tokens", min_length=1)
    number_format: str = Field(..., description="Sample number, e.g. '1,234.56'", min_length=1)
    currency_format: str | None = Field(default=None, description="Sample amount with symbol")
    formality_level: FormalityLevel = FormalityLevel.NEUTRAL
    business_etiquette: BusinessEtiquette | None = None
    writing_direction: WritingDirection = WritingDirection.LTR
    pluralization_rule: PluralRule = PluralRule.ONE_IF_EQUAL_1


class IntentResult(BaseModel):
    """Intent extracted from a normalized command.

    Confidence is a provenance marker: 0.8 for a pattern match,
    0.5 for the keyword fallback.
    """

    intent: str = Field(..., description="Canonical action label")
    entities: dict[str, str] = Field(default_factory=dict, description="Named captures")
    confidence: float = Field(..., ge=0.0, le=1.0)


class MultilingualCommand(BaseModel):
    """A single parsed request, ready for execution."""

    raw_input: str
    detected_language: SupportedLanguage
    normalized_command: str
    intent: str
    entities: dict[str, str] = Field(default_factory=dict)
    cultural_context: CulturalProfile | None = None
    confidence: float = Field(..., ge=0.0, le=1.0)


class LanguageAgentConfig(BaseModel):
    """Per-language response configuration for the orchestrator."""

    language: SupportedLanguage
    response_template: str | None = Field(
        default=None, description="Response template name: professional, formal or polite"
    )
    specialized_vocabulary: list[str] = Field(default_factory=list)


class ProcessResult(BaseModel):
    """Outcome of processing one request in its native language."""

    response: str
    language: SupportedLanguage
    cultural_context: CulturalProfile | None = None
    confidence: float = Field(..., ge=0.0, le=1.0)


class PolyglotCapabilities(BaseModel):
    """What a polyglot agent can do."""

    languages: list[SupportedLanguage]
    primary_language: SupportedLanguage
    translation_pairs: list[tuple[SupportedLanguage, SupportedLanguage]]
    cultural_awareness: bool = True
    domain_expertise: list[str] = Field(
        default_factory=lambda: ["technical", "business", "creative"]
    )


class CacheStats(BaseModel):
    """Cache occupancy snapshot."""

    translation_entries: int = Field(..., ge=0, description="Distinct cached source texts")
    detection_entries: int = Field(..., ge=0, description="Cached detection results")
    total_size: int = Field(..., ge=0, description="UTF-16 bytes of cached translations")


class SensitivityReport(BaseModel):
    """Outcome of a cultural sensitivity check."""

    is_sensitive: bool = False
    warnings: list[str] = Field(default_factory=list)
