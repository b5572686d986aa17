from types import MappingProxyType
from beartype.typing import Dict, List, Mapping, Optional

from gherkin.dialect import DIALECTS

from featurescan.settings import DEFAULT_LANGUAGE

Dialect = Mapping[str, List[str]]


class DialectRepository:
    """Read-only lookup of Gherkin keyword tables by language code.

    Defaults to the dialects shipped with gherkin-official. A custom table can
    be injected, e.g. to restrict the supported languages in tests.
    """

    def __init__(self, dialects: Optional[Dict[str, dict]] = None, default_language: str = DEFAULT_LANGUAGE):
        self._dialects = DIALECTS if dialects is None else dialects
        if default_language not in self._dialects:
            raise KeyError(f"Default language '{default_language}' is not a known dialect")
        self.default_language = default_language

    def lookup(self, language: str) -> Dialect:
        """Returns the keyword table for language, raising KeyError for unknown codes"""
        return MappingProxyType(self._dialects[language])

    def get(self, language: Optional[str]) -> Dialect:
        """Returns the keyword table for language, or the default one if missing or unknown"""
        if language in self._dialects:
            return self.lookup(language)
        return self.english

    @property
    def english(self) -> Dialect:
        return self.lookup(self.default_language)

    def languages(self) -> List[str]:
        return sorted(self._dialects)

    def __contains__(self, language: str) -> bool:
        return language in self._dialects
