"""
Streams parsed Gherkin files as envelopes.

Each file produces, in order: a "source" envelope with the raw text, then
either a "gherkinDocument" envelope followed by one "pickle" envelope per
compiled pickle, or an "attachment" envelope describing the parse errors.
Only the envelopes requested by ParseOptions are emitted.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from beartype.typing import Any, AsyncIterator, Dict, Iterable, List, Optional, Union

from gherkin.errors import ParserError
from gherkin.parser import Parser
from gherkin.pickles.compiler import Compiler
from gherkin.token_matcher import TokenMatcher
from gherkin.token_scanner import TokenScanner

from featurescan.settings import DEFAULT_ENCODING, DEFAULT_LANGUAGE

GHERKIN_MEDIA_TYPE = "text/x.cucumber.gherkin+plain"

Envelope = Dict[str, Any]


@dataclass(frozen=True)
class ParseOptions:
    include_source: bool = True
    include_gherkin_document: bool = True
    include_pickles: bool = False


def parse_file(path: str, options: ParseOptions) -> List[Envelope]:
    """Parses one file into envelopes. Raises OSError and UnicodeDecodeError as is."""
    with open(path, "r", encoding=DEFAULT_ENCODING) as f:
        text = f.read()

    envelopes = []
    if options.include_source:
        envelopes.append({"source": {"uri": path, "data": text, "mediaType": GHERKIN_MEDIA_TYPE}})

    try:
        gherkin_document = Parser().parse(TokenScanner(text))
    except ParserError as e:
        envelopes.append({"attachment": {"data": str(e), "source": {"uri": path}}})
        return envelopes

    gherkin_document["uri"] = path
    if options.include_gherkin_document:
        envelopes.append({"gherkinDocument": gherkin_document})
    if options.include_pickles:
        envelopes.extend({"pickle": pickle} for pickle in Compiler().compile(gherkin_document))
    return envelopes


async def parse(paths: Iterable[Union[str, Path]], options: ParseOptions = ParseOptions()) -> AsyncIterator[Envelope]:
    """Yields the envelopes of every file in paths, parsing each file in a worker thread"""
    for path in paths:
        for envelope in await asyncio.to_thread(parse_file, str(path), options):
            yield envelope


def detect_language(text: str, default: str = DEFAULT_LANGUAGE) -> Optional[str]:
    """Reads the "# language:" header the way the Gherkin parser does, without parsing the rest.

    Only blank and comment lines may precede the header. Returns default when
    there is no header and None when the header names an unknown dialect.
    """
    scanner = TokenScanner(text)
    matcher = TokenMatcher(default)
    while True:
        token = scanner.read()
        if token.eof():
            return default
        try:
            if matcher.match_Language(token):
                return token.matched_text
        except ParserError:
            return None
        if not (matcher.match_Empty(token) or matcher.match_Comment(token)):
            return default
