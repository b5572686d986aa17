from beartype.typing import Callable, Optional, Tuple

from featurescan.constants import WILDCARD_KEYWORD
from featurescan.readers.dialect_repository import Dialect


def find_keyword(line: str, dialect: Dialect) -> Optional[Tuple[str, str]]:
    """Finds the longest keyword literal the stripped line starts with.

    Literals overlap, e.g. "Szenario" and "Szenariogrundriss" or "* " and
    "*  ", so every literal of every category is checked and the longest wins.

    :return: (keyword type, localized literal) or None if no keyword matches
    """
    trimmed_line = line.strip()
    best_keyword_type = None
    best_localized_keyword = ""
    for keyword_type, localized_keywords in dialect.items():
        # "name" and "native" are plain strings, not keyword lists
        if not isinstance(localized_keywords, list):
            continue
        for localized_keyword in localized_keywords:
            if trimmed_line.startswith(localized_keyword) and len(localized_keyword) > len(best_localized_keyword):
                best_keyword_type = keyword_type
                best_localized_keyword = localized_keyword
    if best_keyword_type is None:
        return None
    return best_keyword_type, best_localized_keyword


def english_keyword(keyword_type: str, english_dialect: Dialect) -> str:
    return next(keyword for keyword in english_dialect[keyword_type] if keyword != WILDCARD_KEYWORD)


def translate_line(line: str, dialect: Dialect, english_dialect: Dialect) -> str:
    """Replaces the localized keyword a line starts with by its English equivalent.

    Only the first occurrence of the localized literal is replaced, wherever it
    is in the line. Lines without a keyword are returned unchanged.
    """
    match = find_keyword(line, dialect)
    if match is None:
        return line
    keyword_type, localized_keyword = match
    return line.replace(localized_keyword, english_keyword(keyword_type, english_dialect), 1)


def make_line_translator(dialect: Dialect, english_dialect: Dialect) -> Callable[[str], str]:
    def translate(line: str) -> str:
        return translate_line(line, dialect, english_dialect)

    return translate
