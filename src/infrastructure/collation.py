"""
Collator provider: builds a locale-aware string comparator.

Collation is delegated to ICU through PyICU, which is an optional extra
(``pip install omegasort[locale]``).  Only runs that pass a locale need it.
"""
from __future__ import annotations

import logging
import re

from core.errors import InvalidLocaleError, SortError
from core.interfaces import Collator

logger = logging.getLogger(__name__)

# BCP 47 language tag: language[-script][-region](-variant)*(-extension)*[-x-private]
_LANGUAGE_TAG_RE = re.compile(
    r"""
    \A
    (?:[a-z]{2,3}|[a-z]{5,8})
    (?:-[a-z]{4})?
    (?:-(?:[a-z]{2}|[0-9]{3}))?
    (?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*
    (?:-[a-wyz0-9](?:-[a-z0-9]{2,8})+)*
    (?:-x(?:-[a-z0-9]{1,8})+)?
    \Z
    """,
    re.VERBOSE | re.IGNORECASE,
)


def normalize_locale_name(locale_name: str) -> str:
    """Validate *locale_name* and return it with ``-`` separators."""
    tag = locale_name.replace("_", "-")
    if not _LANGUAGE_TAG_RE.match(tag):
        raise InvalidLocaleError(locale_name, "not a well-formed language tag")
    return tag


def build_collator(locale_name: str, case_insensitive: bool) -> Collator:
    """
    Create a collator for *locale_name*.

    With *case_insensitive* the collator runs at secondary strength, which
    ignores case differences (and nothing that the default strength would
    not also weigh).

    Raises:
        InvalidLocaleError: the name is not a well-formed language tag.
        SortError: PyICU is not installed.
    """
    tag = normalize_locale_name(locale_name)
    logger.debug("Creating collator for locale: %s", tag)

    try:
        import icu
    except ImportError as exc:
        raise SortError(
            "locale-aware sorting requires PyICU; install it with "
            "`pip install omegasort[locale]`"
        ) from exc

    collator = icu.Collator.createInstance(icu.Locale.forLanguageTag(tag))
    if case_insensitive:
        logger.debug("Setting collator strength to secondary to make it case-insensitive")
        collator.setStrength(icu.Collator.SECONDARY)
    return collator
