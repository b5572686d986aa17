from beartype.typing import Optional

from featurescan.constants import CONJUNCTION_KEYWORDS, DIAGNOSTIC_MESSAGES, PRIMARY_KEYWORDS
from featurescan.data_classes.diagnostics import DiagnosticsCollector
from featurescan.readers.dialect_repository import Dialect


def resolve_keyword(
    localized_keyword: str,
    previous_keyword: Optional[str],
    dialect: Dialect,
    diagnostics: Optional[DiagnosticsCollector] = None,
    file: Optional[str] = None,
    line: Optional[int] = None,
) -> Optional[str]:
    """Resolves a localized step keyword to Given, When or Then.

    The keyword must equal one of the dialect's literals exactly, trailing space
    included ("Angenommen "). Conjunctions (And/But) take over previous_keyword.

    :param localized_keyword: keyword as written in the step
    :param previous_keyword: last resolved keyword of the scenario, None at its start
    :param dialect: keyword table of the feature's language
    :param diagnostics: sink for unresolved keywords
    :return: canonical keyword, or None if the step has to be dropped
    """
    for keyword_type, canonical in PRIMARY_KEYWORDS.items():
        if localized_keyword in dialect.get(keyword_type, []):
            return canonical

    for keyword_type in CONJUNCTION_KEYWORDS:
        if localized_keyword in dialect.get(keyword_type, []):
            if previous_keyword is None and diagnostics is not None:
                diagnostics.error(
                    DIAGNOSTIC_MESSAGES["conjunction_without_primary"].format(keyword=localized_keyword),
                    file=file,
                    line=line,
                )
            return previous_keyword

    if diagnostics is not None:
        diagnostics.error(DIAGNOSTIC_MESSAGES["unknown_keyword"].format(keyword=localized_keyword), file=file, line=line)
    return None
