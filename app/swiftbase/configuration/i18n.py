"""Localization engine settings."""

from typing import List

from pydantic import Field, field_validator

from swiftbase.configuration.base import FeatureSettings
from swiftbase.languages import FALLBACK_LANGUAGE, normalize_language


class I18nSettings(FeatureSettings):
    """Localization engine configuration.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used for system messages (default: en)
        I18N_FALLBACK_LANGUAGE: Language used when a user declares none (default: en)
        I18N_DEBUG: Log every key mapping at INFO instead of DEBUG (default: False)
        I18N_AVAILABLE_LANGUAGES: JSON list of languages the application ships

    Example:
        ```python
        from swiftbase.services import get_settings

        settings = get_settings()
        lang = settings.i18n.default_language
        ```
    """

    default_language: str = Field(
        default=FALLBACK_LANGUAGE,
        alias="I18N_DEFAULT_LANGUAGE",
        description="Process default language for system-context messages",
    )
    fallback_language: str = Field(
        default=FALLBACK_LANGUAGE,
        alias="I18N_FALLBACK_LANGUAGE",
        description="Language used when a user context declares no language",
    )
    debug: bool = Field(
        default=False,
        alias="I18N_DEBUG",
        description="Verbose mapping diagnostics",
    )
    available_languages: List[str] = Field(
        default_factory=lambda: [FALLBACK_LANGUAGE],
        alias="I18N_AVAILABLE_LANGUAGES",
        description="Languages the application ships packs for",
    )

    @field_validator("default_language", "fallback_language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return normalize_language(value) or FALLBACK_LANGUAGE

    @field_validator("available_languages")
    @classmethod
    def _normalize_available(cls, value: List[str]) -> List[str]:
        languages: List[str] = []
        for code in value:
            lang = normalize_language(code)
            if lang and lang not in languages:
                languages.append(lang)
        return languages
