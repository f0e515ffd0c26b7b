"""Workspace display settings."""

from babel import Locale, UnknownLocaleError
from pydantic import AliasChoices, Field, field_validator

from timeledger.models.base import BaseDataModel


def parse_locale(locale_tag: str) -> Locale:
    """Parse a locale tag such as "fr-FR" or "fr_FR".

    Raises:
        ValueError: If Babel does not know the locale
    """
    try:
        return Locale.parse(locale_tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Unknown locale: {locale_tag}") from e


class WorkspaceSettings(BaseDataModel):
    """Currency settings of a workspace.

    All amounts of a workspace are in one currency; these values are only
    used to format amounts for display.

    Example:
        >>> WorkspaceSettings(currency="eur", currency_locale="fr-FR").currency
        'EUR'
    """

    currency: str = Field("USD", description="ISO 4217 currency code")
    currency_locale: str = Field(
        "en-US",
        validation_alias=AliasChoices("currency_locale", "currencyLocale"),
        description="Locale tag for number formatting (e.g. fr-FR)",
    )

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Ensure the currency is a three-letter code."""
        v = v.strip().upper()
        if len(v) != 3 or not v.isalpha():
            raise ValueError(f"Invalid currency code: {v}")
        return v

    @field_validator("currency_locale")
    @classmethod
    def validate_currency_locale(cls, v: str) -> str:
        """Ensure the locale is known to Babel."""
        parse_locale(v)
        return v
