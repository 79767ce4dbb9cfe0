from babel import Locale, UnknownLocaleError
from babel.dates import format_date

from clinic.services.calendar_window import CalendarInputError, ViewMode, ViewWindow


class InvalidLocaleError(CalendarInputError):
    pass


def parse_locale(locale: str | Locale) -> Locale:
    """Accept Babel or BCP 47 identifiers: "en", "en_US", "en-US", "ar-SA"."""
    if isinstance(locale, Locale):
        return locale
    try:
        return Locale.parse(str(locale).strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidLocaleError(f"Unknown locale {locale!r}") from e


def is_rtl(locale: str | Locale) -> bool:
    return parse_locale(locale).text_direction == "rtl"


def format_title(mode: ViewMode | str, window: ViewWindow, locale: str | Locale = "en") -> str:
    """Human-readable heading of the visible window.

    month -> "December 2024", week -> "Dec 15, 2024 - Dec 21, 2024",
    day -> "Friday, December 20, 2024" (in en).
    """
    mode = ViewMode.parse(mode)
    loc = parse_locale(locale)
    if mode is ViewMode.MONTH:
        return format_date(window.reference_date, "MMMM y", locale=loc)
    if mode is ViewMode.WEEK:
        start = format_date(window.start_date, "medium", locale=loc)
        end = format_date(window.end_date, "medium", locale=loc)
        return f"{start} - {end}"
    return format_date(window.reference_date, "full", locale=loc)
