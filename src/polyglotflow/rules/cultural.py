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


"""Cultural rule tables.

Static per-language data used by the cultural context analyzer:
- Base cultural profiles (formats, formality, business etiquette)
- Time-of-day greetings
- Business communication templates
- Business-topic and sensitive-topic lexicons
- Locale tags and currencies for locale-database formatting

Base profiles are never handed out directly; use get_base_profile(), which
returns a deep copy.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from polyglotflow.core.models import (
    BusinessEtiquette,
    CommunicationStyle,
    CulturalProfile,
    DecisionMaking,
    FormalityLevel,
    PluralRule,
    SupportedLanguage,
    WritingDirection,
)

L = SupportedLanguage
C = CommunicationStyle
D = DecisionMaking
F = FormalityLevel


def _profile(
    language: SupportedLanguage,
    region: str,
    timezone: str,
    date_format: str,
    number_format: str,
    currency_format: str,
    formality: FormalityLevel,
    greeting: str,
    communication: CommunicationStyle,
    decision: DecisionMaking,
    plural_rule: PluralRule,
) -> CulturalProfile:
    return CulturalProfile(
        language=language,
        region=region,
        timezone=timezone,
        date_format=date_format,
        number_format=number_format,
        currency_format=currency_format,
        formality_level=formality,
        business_etiquette=BusinessEtiquette(
            greeting_style=greeting,
            communication_style=communication,
            decision_making=decision,
        ),
        writing_direction=WritingDirection.LTR,
        pluralization_rule=plural_rule,
    )


# fmt: off
_BASE_PROFILES: dict[SupportedLanguage, CulturalProfile] = {
    L.EN: _profile(
        L.EN, "US", "America/New_York", "MM/DD/YYYY", "1,234.56", "$1,234.56",
        F.NEUTRAL, "Hi/Hello", C.DIRECT, D.INDIVIDUAL, PluralRule.ONE_IF_EQUAL_1,
    ),
    L.RU: _profile(
        L.RU, "RU", "Europe/Moscow", "DD.MM.YYYY", "1 234,56", "1 234,56 ₽",
        F.FORMAL, "Здравствуйте", C.CONTEXTUAL, D.HIERARCHICAL, PluralRule.EAST_SLAVIC,
    ),
    L.ZH_CN: _profile(
        L.ZH_CN, "CN", "Asia/Shanghai", "YYYY年MM月DD日", "1,234.56", "¥1,234.56",
        F.FORMAL, "您好", C.INDIRECT, D.HIERARCHICAL, PluralRule.ALWAYS_OTHER,
    ),
    L.ZH_TW: _profile(
        L.ZH_TW, "TW", "Asia/Taipei", "YYYY年MM月DD日", "1,234.56", "NT$1,234.56",
        F.FORMAL, "您好", C.INDIRECT, D.CONSENSUS, PluralRule.ALWAYS_OTHER,
    ),
    L.JA: _profile(
        L.JA, "JP", "Asia/Tokyo", "YYYY年MM月DD日", "1,234.56", "¥1,234",
        F.VERY_FORMAL, "お世話になっております", C.INDIRECT, D.CONSENSUS,
        PluralRule.ALWAYS_OTHER,
    ),
    L.KO: _profile(
        L.KO, "KR", "Asia/Seoul", "YYYY년 MM월 DD일", "1,234.56", "₩1,234",
        F.VERY_FORMAL, "안녕하십니까", C.INDIRECT, D.HIERARCHICAL, PluralRule.ALWAYS_OTHER,
    ),
    L.DE: _profile(
        L.DE, "DE", "Europe/Berlin", "DD.MM.YYYY", "1.234,56", "1.234,56 €",
        F.FORMAL, "Guten Tag", C.DIRECT, D.CONSENSUS, PluralRule.ONE_IF_EQUAL_1,
    ),
    L.FR: _profile(
        L.FR, "FR", "Europe/Paris", "DD/MM/YYYY", "1 234,56", "1 234,56 €",
        F.FORMAL, "Bonjour", C.CONTEXTUAL, D.HIERARCHICAL, PluralRule.ONE_IF_0_OR_1,
    ),
    L.ES: _profile(
        L.ES, "ES", "Europe/Madrid", "DD/MM/YYYY", "1.234,56", "1.234,56 €",
        F.NEUTRAL, "Hola/Buenos días", C.CONTEXTUAL, D.HIERARCHICAL, PluralRule.ONE_IF_EQUAL_1,
    ),
    L.PT: _profile(
        L.PT, "BR", "America/Sao_Paulo", "DD/MM/YYYY", "1.234,56", "R$ 1.234,56",
        F.NEUTRAL, "Olá/Bom dia", C.CONTEXTUAL, D.CONSENSUS, PluralRule.ONE_IF_0_OR_1,
    ),
    L.TR: _profile(
        L.TR, "TR", "Europe/Istanbul", "DD.MM.YYYY", "1.234,56", "1.234,56 ₺",
        F.FORMAL, "Merhaba/Günaydın", C.INDIRECT, D.HIERARCHICAL, PluralRule.ONE_IF_EQUAL_1,
    ),
    L.TH: _profile(
        L.TH, "TH", "Asia/Bangkok", "DD/MM/YYYY", "1,234.56", "฿1,234.56",
        F.FORMAL, "สวัสดีครับ/ค่ะ", C.INDIRECT, D.HIERARCHICAL, PluralRule.ALWAYS_OTHER,
    ),
    L.IT: _profile(
        L.IT, "IT", "Europe/Rome", "DD/MM/YYYY", "1.234,56", "€ 1.234,56",
        F.FORMAL, "Buongiorno", C.CONTEXTUAL, D.HIERARCHICAL, PluralRule.ONE_IF_EQUAL_1,
    ),
    L.HI: _profile(
        L.HI, "IN", "Asia/Kolkata", "DD/MM/YYYY", "1,23,456.78", "₹1,23,456.78",
        F.FORMAL, "नमस्ते", C.INDIRECT, D.HIERARCHICAL, PluralRule.ONE_IF_0_OR_1,
    ),
}
# fmt: on

BASE_PROFILES: Mapping[SupportedLanguage, CulturalProfile] = MappingProxyType(_BASE_PROFILES)

# Hour buckets: [5, 12) morning, [12, 17) afternoon, [17, 21) evening, else night
TIME_BASED_GREETINGS: Mapping[SupportedLanguage, Mapping[str, str]] = MappingProxyType(
    {
        L.EN: {
            "morning": "Good morning",
            "afternoon": "Good afternoon",
            "evening": "Good evening",
            "night": "Good night",
        },
        L.RU: {
            "morning": "Доброе утро",
            "afternoon": "Добрый день",
            "evening": "Добрый вечер",
            "night": "Спокойной ночи",
        },
        L.ZH_CN: {"morning": "早上好", "afternoon": "下午好", "evening": "晚上好", "night": "晚安"},
        L.ZH_TW: {"morning": "早安", "afternoon": "午安", "evening": "晚安", "night": "晚安"},
        L.JA: {
            "morning": "おはようございます",
            "afternoon": "こんにちは",
            "evening": "こんばんは",
            "night": "おやすみなさい",
        },
        L.KO: {
            "morning": "좋은 아침입니다",
            "afternoon": "안녕하세요",
            "evening": "좋은 저녁입니다",
            "night": "안녕히 주무세요",
        },
        L.DE: {
            "morning": "Guten Morgen",
            "afternoon": "Guten Tag",
            "evening": "Guten Abend",
            "night": "Gute Nacht",
        },
        L.FR: {
            "morning": "Bonjour",
            "afternoon": "Bon après-midi",
            "evening": "Bonsoir",
            "night": "Bonne nuit",
        },
        L.ES: {
            "morning": "Buenos días",
            "afternoon": "Buenas tardes",
            "evening": "Buenas tardes",
            "night": "Buenas noches",
        },
        L.PT: {
            "morning": "Bom dia",
            "afternoon": "Boa tarde",
            "evening": "Boa noite",
            "night": "Boa noite",
        },
        L.TR: {
            "morning": "Günaydın",
            "afternoon": "İyi günler",
            "evening": "İyi akşamlar",
            "night": "İyi geceler",
        },
        L.TH: {
            "morning": "สวัสดีตอนเช้า",
            "afternoon": "สวัสดีตอนบ่าย",
            "evening": "สวัสดีตอนเย็น",
            "night": "ราตรีสวัสดิ์",
        },
        L.IT: {
            "morning": "Buongiorno",
            "afternoon": "Buon pomeriggio",
            "evening": "Buonasera",
            "night": "Buonanotte",
        },
        L.HI: {
            "morning": "शुभ प्रभात",
            "afternoon": "शुभ दोपहर",
            "evening": "शुभ संध्या",
            "night": "शुभ रात्रि",
        },
    }
)

# Business communication templates: email_opening, email_closing,
# meeting_request, thank_you. {name} and {topic} are placeholders.
BUSINESS_TEMPLATES: Mapping[SupportedLanguage, Mapping[str, str]] = MappingProxyType(
    {
        L.EN: {
            "email_opening": "Dear {name},",
            "email_closing": "Best regards,",
            "meeting_request": "I would like to schedule a meeting to discuss {topic}.",
            "thank_you": "Thank you for your time and consideration.",
        },
        L.RU: {
            "email_opening": "Уважаемый(ая) {name},",
            "email_closing": "С уважением,",
            "meeting_request": "Хотел(а) бы назначить встречу для обсуждения {topic}.",
            "thank_you": "Спасибо за ваше время и внимание.",
        },
        L.ZH_CN: {
            "email_opening": "尊敬的{name}：",
            "email_closing": "此致敬礼",
            "meeting_request": "我想安排一次会议讨论{topic}。",
            "thank_you": "感谢您的时间和关注。",
        },
        L.ZH_TW: {
            "email_opening": "尊敬的{name}：",
            "email_closing": "此致敬禮",
            "meeting_request": "我想安排一次會議討論{topic}。",
            "thank_you": "感謝您的時間和關注。",
        },
        L.JA: {
            "email_opening": "{name}様",
            "email_closing": "よろしくお願いいたします。",
            "meeting_request": "{topic}について打ち合わせをさせていただければと思います。",
            "thank_you": "お忙しい中、ありがとうございます。",
        },
        L.KO: {
            "email_opening": "{name}님께",
            "email_closing": "감사합니다.",
            "meeting_request": "{topic}에 대해 논의하기 위한 회의를 잡고 싶습니다.",
            "thank_you": "시간 내주셔서 감사합니다.",
        },
        L.DE: {
            "email_opening": "Sehr geehrte(r) {name},",
            "email_closing": "Mit freundlichen Grüßen",
            "meeting_request": "Ich möchte gerne ein Meeting vereinbaren, um {topic} zu besprechen.",
            "thank_you": "Vielen Dank für Ihre Zeit und Aufmerksamkeit.",
        },
        L.FR: {
            "email_opening": "Cher(ère) {name},",
            "email_closing": "Cordialement",
            "meeting_request": "Je souhaiterais organiser une réunion pour discuter de {topic}.",
            "thank_you": "Merci pour votre temps et votre attention.",
        },
        L.ES: {
            "email_opening": "Estimado/a {name},",
            "email_closing": "Atentamente",
            "meeting_request": "Me gustaría programar una reunión para discutir {topic}.",
            "thank_you": "Gracias por su tiempo y atención.",
        },
        L.PT: {
            "email_opening": "Prezado/a {name},",
            "email_closing": "Atenciosamente",
            "meeting_request": "Gostaria de agendar uma reunião para discutir {topic}.",
            "thank_you": "Obrigado pelo seu tempo e atenção.",
        },
        L.TR: {
            "email_opening": "Sayın {name},",
            "email_closing": "Saygılarımla",
            "meeting_request": "{topic} konusunu görüşmek için bir toplantı ayarlamak istiyorum.",
            "thank_you": "Zaman ayırdığınız için teşekkür ederim.",
        },
        L.TH: {
            "email_opening": "เรียน {name}",
            "email_closing": "ขอแสดงความนับถือ",
            "meeting_request": "ขอนัดประชุมเพื่อหารือเรื่อง {topic}",
            "thank_you": "ขอบคุณสำหรับเวลาและความสนใจของคุณ",
        },
        L.IT: {
            "email_opening": "Gentile {name},",
            "email_closing": "Cordiali saluti",
            "meeting_request": "Vorrei programmare un incontro per discutere {topic}.",
            "thank_you": "Grazie per il tempo e l'attenzione.",
        },
        L.HI: {
            "email_opening": "प्रिय {name},",
            "email_closing": "सादर",
            "meeting_request": "मैं {topic} पर चर्चा करने के लिए एक बैठक निर्धारित करना चाहूंगा।",
            "thank_you": "आपके समय और ध्यान के लिए धन्यवाद।",
        },
    }
)

# Checked in this order; the first topic found decides, later ones are ignored
BUSINESS_INDICATORS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("meeting", ("meeting", "встреча", "会議", "会议", "회의")),
    ("presentation", ("presentation", "презентация", "プレゼン", "演示", "발표")),
    ("negotiation", ("negotiation", "переговоры", "交渉", "谈判", "협상")),
    ("contract", ("contract", "договор", "契約", "合同", "계약")),
)

# Etiquette forced by a business topic; topics not listed change nothing
BUSINESS_TOPIC_ETIQUETTE: Mapping[str, tuple[CommunicationStyle, DecisionMaking]] = (
    MappingProxyType(
        {
            "negotiation": (C.INDIRECT, D.CONSENSUS),
            "presentation": (C.DIRECT, D.HIERARCHICAL),
        }
    )
)

SENSITIVE_TOPICS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("politics", ("politics", "government", "election", "политика", "政治")),
    ("religion", ("religion", "god", "faith", "религия", "宗教")),
    ("personal", ("age", "salary", "marriage", "возраст", "зарплата", "年齢", "給料")),
)

# Informal markers that are out of place in a formal or very-formal context
INFORMAL_IN_FORMAL_MARKERS: tuple[str, ...] = ("hey", "yeah", "nope", "gonna", "wanna")

# Locale tag and ISO 4217 currency per language for locale-database formatting
LANGUAGE_LOCALES: Mapping[SupportedLanguage, str] = MappingProxyType(
    {
        L.EN: "en-US",
        L.RU: "ru-RU",
        L.ZH_CN: "zh-CN",
        L.ZH_TW: "zh-TW",
        L.JA: "ja-JP",
        L.KO: "ko-KR",
        L.DE: "de-DE",
        L.FR: "fr-FR",
        L.ES: "es-ES",
        L.PT: "pt-PT",
        L.TR: "tr-TR",
        L.TH: "th-TH",
        L.IT: "it-IT",
        L.HI: "hi-IN",
    }
)

LANGUAGE_CURRENCIES: Mapping[SupportedLanguage, str] = MappingProxyType(
    {
        L.EN: "USD",
        L.RU: "RUB",
        L.ZH_CN: "CNY",
        L.ZH_TW: "TWD",
        L.JA: "JPY",
        L.KO: "KRW",
        L.DE: "EUR",
        L.FR: "EUR",
        L.ES: "EUR",
        L.PT: "EUR",
        L.TR: "TRY",
        L.TH: "THB",
        L.IT: "EUR",
        L.HI: "INR",
    }
)


def get_base_profile(language: SupportedLanguage) -> CulturalProfile:
    """Get a private deep copy of a language's base cultural profile.

    Args:
        language: Supported language

    Returns:
        Deep copy of the static base profile; mutating it never affects the table
    """
    return BASE_PROFILES[language].model_copy(deep=True)
