from enum import Enum


class LanguageCode(str, Enum):
    """Common language codes.

    Not enforced anywhere: any code accepted by the Wikibase instance can be
    passed as a plain string instead.
    """

    ARABIC = "ar"
    BRAZILIAN_PORTUGUESE = "pt-br"
    CHINESE = "zh"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_UK = "en-gb"
    FRENCH = "fr"
    GERMAN = "de"
    HEBREW = "he"
    HINDI = "hi"
    ITALIAN = "it"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SIMPLIFIED_CHINESE = "zh-hans"
    SPANISH = "es"
    TRADITIONAL_CHINESE = "zh-hant"
    TURKISH = "tr"
    UKRAINIAN = "uk"
