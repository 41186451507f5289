"""Language string tables for the visualization module and the host core."""

from app.lang.en_us import CORE_STRINGS as EN_US_CORE
from app.lang.en_us import MODULE_STRINGS as EN_US_MODULE

LANGUAGES: dict[str, tuple[dict[str, str], dict[str, str]]] = {
    "en_us": (EN_US_MODULE, EN_US_CORE),
}


def get_strings(lang: str) -> tuple[dict[str, str], dict[str, str]]:
    """Get (module, core) string tables for a language."""
    return LANGUAGES[lang]


__all__ = [
    "LANGUAGES",
    "get_strings",
]
