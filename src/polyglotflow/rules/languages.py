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


"""Per-language lexical rule tables.

Immutable data driving detection, normalization and intent extraction:
- Lexical markers: function-word and script-range regexes, scored by match count
- Common phrases: verbatim greetings and courtesy words, worth 10 points each
- Formality markers: informal / formal / very-formal substrings
- Intent patterns: ordered (intent, regex) pairs with named captures

Some languages only have part of these tables. Consumers must fall back
gracefully: get_rule_set() always returns a rule set, with empty tuples where
a table has no entry.

Example:
    >>> rules = get_rule_set(SupportedLanguage.EN)
    >>> [intent for intent, _ in rules.intent_patterns][:2]
    ['create', 'delete']
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from polyglotflow.core.models import SupportedLanguage

L = SupportedLanguage

# Language used for intent extraction when a language has no pattern table
DEFAULT_INTENT_LANGUAGE = L.EN

# Points added per common phrase found in the text
PHRASE_WEIGHT = 10

_I = re.IGNORECASE

LEXICAL_MARKERS: dict[SupportedLanguage, tuple[re.Pattern[str], ...]] = {
    L.EN: (
        re.compile(r"\b(the|and|or|but|in|on|at|to|for)\b", _I),
        re.compile(r"\b(is|are|was|were|been|being)\b", _I),
    ),
    L.RU: (
        re.compile(r"[а-яА-ЯёЁ]+"),
        re.compile(r"\b(и|или|но|в|на|для|с|по)\b", _I),
    ),
    L.ZH_CN: (
        re.compile(r"[\u4e00-\u9fff]+"),
        re.compile(r"[\u3400-\u4dbf]+"),
    ),
    L.ZH_TW: (
        re.compile(r"[\u4e00-\u9fff]+"),
        re.compile(r"[\u3400-\u4dbf]+"),
    ),
    L.JA: (
        re.compile(r"[\u3040-\u309f]+"),  # Hiragana
        re.compile(r"[\u30a0-\u30ff]+"),  # Katakana
        re.compile(r"[\u4e00-\u9faf]+"),  # Kanji
    ),
    L.KO: (
        re.compile(r"[\uac00-\ud7af]+"),  # Hangul syllables
        re.compile(r"[\u1100-\u11ff]+"),  # Hangul Jamo
    ),
    L.DE: (
        re.compile(r"\b(der|die|das|und|oder|aber|in|auf|mit)\b", _I),
        re.compile(r"[äöüÄÖÜß]"),
    ),
    L.FR: (
        re.compile(r"\b(le|la|les|et|ou|mais|dans|sur|avec)\b", _I),
        re.compile(r"[àâçèéêëîïôùûüÿœæ]", _I),
    ),
    L.ES: (
        re.compile(r"\b(el|la|los|las|y|o|pero|en|con)\b", _I),
        re.compile(r"[áéíóúñ¿¡]", _I),
    ),
    L.PT: (
        re.compile(r"\b(o|a|os|as|e|ou|mas|em|com)\b", _I),
        re.compile(r"[àáâãçéêíóôõú]", _I),
    ),
    L.TR: (
        re.compile(r"\b(ve|veya|ama|ile|için)\b", _I),
        re.compile(r"[çğıöşüÇĞİÖŞÜ]"),
    ),
    L.TH: (
        re.compile(r"[\u0e00-\u0e7f]+"),  # Thai characters
        re.compile(r"\b(และ|หรือ|แต่|ใน|กับ)\b"),
    ),
    L.IT: (
        re.compile(r"\b(il|la|lo|gli|le|e|o|ma|in|con)\b", _I),
        re.compile(r"[àèéìòù]", _I),
    ),
    L.HI: (
        re.compile(r"[\u0900-\u097f]+"),  # Devanagari
        re.compile(r"\b(और|या|लेकिन|में|के साथ)\b"),
    ),
}

COMMON_PHRASES: dict[SupportedLanguage, tuple[str, ...]] = {
    L.EN: ("hello", "please", "thank you", "yes", "no"),
    L.RU: ("привет", "пожалуйста", "спасибо", "да", "нет"),
    L.ZH_CN: ("你好", "请", "谢谢", "是", "不是"),
    L.ZH_TW: ("你好", "請", "謝謝", "是", "不是"),
    L.JA: ("こんにちは", "お願いします", "ありがとう", "はい", "いいえ"),
    L.KO: ("안녕하세요", "부탁합니다", "감사합니다", "네", "아니요"),
    L.DE: ("hallo", "bitte", "danke", "ja", "nein"),
    L.FR: ("bonjour", "s'il vous plaît", "merci", "oui", "non"),
    L.ES: ("hola", "por favor", "gracias", "sí", "no"),
    L.PT: ("olá", "por favor", "obrigado", "sim", "não"),
    L.TR: ("merhaba", "lütfen", "teşekkürler", "evet", "hayır"),
    L.TH: ("สวัสดี", "กรุณา", "ขอบคุณ", "ใช่", "ไม่"),
    L.IT: ("ciao", "per favore", "grazie", "sì", "no"),
    L.HI: ("नमस्ते", "कृपया", "धन्यवाद", "हाँ", "नहीं"),
}


@dataclass(frozen=True)
class FormalityMarkers:
    """Substrings signalling each register, matched case-insensitively."""

    informal: tuple[str, ...]
    formal: tuple[str, ...]
    very_formal: tuple[str, ...]


FORMALITY_MARKERS: dict[SupportedLanguage, FormalityMarkers] = {
    L.EN: FormalityMarkers(
        informal=("hey", "hi", "yeah", "yep", "nope", "gonna", "wanna"),
        formal=("please", "kindly", "would you", "could you", "sir", "madam"),
        very_formal=("respectfully", "esteemed", "distinguished", "honorable"),
    ),
    L.RU: FormalityMarkers(
        informal=("привет", "ты", "твой", "давай", "окей"),
        formal=("вы", "ваш", "пожалуйста", "будьте добры"),
        very_formal=("уважаемый", "господин", "госпожа", "высокоуважаемый"),
    ),
    L.JA: FormalityMarkers(
        informal=("だ", "だよ", "だね", "じゃん", "ちゃん"),
        formal=("です", "ます", "ください", "さん"),
        very_formal=("ございます", "いらっしゃいます", "申し上げます", "様"),
    ),
    L.KO: FormalityMarkers(
        informal=("야", "아/어", "니", "너", "네"),
        formal=("요", "습니다", "세요", "씨"),
        very_formal=("십니다", "하십시오", "님", "귀하"),
    ),
}

# Articles and the word "new" are skipped so the captured target is the noun
_EN_SKIP = r"(?:(?:a|an|the|new)\s+)*"

INTENT_PATTERNS: dict[SupportedLanguage, tuple[tuple[str, re.Pattern[str]], ...]] = {
    L.EN: (
        (
            "create",
            re.compile(
                rf"\b(?:create|make|build|generate|construct)\b\s+{_EN_SKIP}(?P<target>\w+)", _I
            ),
        ),
        (
            "delete",
            re.compile(rf"\b(?:delete|remove|destroy|eliminate)\b\s+{_EN_SKIP}(?P<target>\w+)", _I),
        ),
        (
            "update",
            re.compile(rf"\b(?:update|modify|change|edit)\b\s+{_EN_SKIP}(?P<target>\w+)", _I),
        ),
        ("search", re.compile(r"\b(?:search|find|look for|query)\b\s*(?:for\s+)?(?P<query>.*)", _I)),
        ("status", re.compile(r"\bshow\s+(?:me\s+)?(?:the\s+)?status\b", _I)),
        ("help", re.compile(r"\b(?:help|assist|support|guide)\b", _I)),
    ),
    L.RU: (
        (
            "create",
            re.compile(
                r"\b(?:создать|создай(?:те)?|сделать|сделай(?:те)?|построить)\b\s+"
                r"(?:нов(?:ый|ую|ое|ые)\s+)?(?P<target>\w+)",
                _I,
            ),
        ),
        (
            "delete",
            re.compile(r"\b(?:удалить|удали(?:те)?|убрать|убери(?:те)?)\b\s+(?P<target>\w+)", _I),
        ),
        (
            "update",
            re.compile(r"\b(?:обновить|обнови(?:те)?|изменить|измени(?:те)?)\b\s+(?P<target>\w+)", _I),
        ),
        (
            "search",
            re.compile(r"\b(?:найти|найди(?:те)?|искать|ищи(?:те)?|поиск)\b\s*(?P<query>.*)", _I),
        ),
        ("status", re.compile(r"\bпокажи(?:те)?\s+статус\b", _I)),
        ("help", re.compile(r"\b(?:помощь|помоги(?:те)?|поддержка|справка)\b", _I)),
    ),
    L.JA: (
        ("create", re.compile(r"新しい(?P<target>\w+?)を作成")),
        ("build", re.compile(r"(?P<target>\w+?)をビルド")),
        ("status", re.compile(r"ステータスを表示")),
        ("help", re.compile(r"(?P<target>\w+?)について助けて")),
    ),
}

# Keyword fallback, checked in this order when no pattern matches
INTENT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("create", ("new", "add", "create", "make", "build")),
    ("delete", ("delete", "remove", "destroy", "clear")),
    ("update", ("update", "change", "modify", "edit")),
    ("search", ("find", "search", "look", "where", "what")),
    ("help", ("help", "how", "why", "explain", "guide")),
)


@dataclass(frozen=True)
class LanguageRuleSet:
    """Immutable bundle of lexical rules for one language."""

    language: SupportedLanguage
    lexical_markers: tuple[re.Pattern[str], ...] = ()
    common_phrases: tuple[str, ...] = ()
    formality_markers: FormalityMarkers | None = None
    intent_patterns: tuple[tuple[str, re.Pattern[str]], ...] = ()

    @property
    def has_intent_patterns(self) -> bool:
        """True when the language has its own intent table."""
        return bool(self.intent_patterns)


def _build_rule_sets() -> Mapping[SupportedLanguage, LanguageRuleSet]:
    return MappingProxyType(
        {
            language: LanguageRuleSet(
                language=language,
                lexical_markers=LEXICAL_MARKERS.get(language, ()),
                common_phrases=COMMON_PHRASES.get(language, ()),
                formality_markers=FORMALITY_MARKERS.get(language),
                intent_patterns=INTENT_PATTERNS.get(language, ()),
            )
            for language in SupportedLanguage
        }
    )


RULE_SETS: Mapping[SupportedLanguage, LanguageRuleSet] = _build_rule_sets()


def get_rule_set(language: SupportedLanguage) -> LanguageRuleSet:
    """Get the rule set for a language.

    Args:
        language: Supported language

    Returns:
        The language's immutable rule set (possibly with empty tables)
    """
    return RULE_SETS[language]
