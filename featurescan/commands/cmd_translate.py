import click
from beartype.typing import Optional

from featurescan.cli import pass_environment, Environment, CONTEXT_SETTINGS
from featurescan.constants import FAULT_MAPPING
from featurescan.readers.dialect_repository import DialectRepository
from featurescan.readers.gherkin_source import ParseOptions, detect_language, parse_file
from featurescan.readers.line_translator import make_line_translator
from featurescan.settings import DEFAULT_LANGUAGE


def translate_source(source: str, language: str, dialects: DialectRepository) -> str:
    translate = make_line_translator(dialects.lookup(language), dialects.english)
    return "\n".join(translate(line) for line in source.split("\n"))


def document_language(envelopes: list, source: str, environment: Environment) -> Optional[str]:
    """Language of the parsed document, or of the "# language:" header when the file does not parse"""
    document = next((envelope["gherkinDocument"] for envelope in envelopes if "gherkinDocument" in envelope), None)
    if document is not None:
        return (document.get("feature") or {}).get("language", DEFAULT_LANGUAGE)

    details = next((envelope["attachment"]["data"] for envelope in envelopes if "attachment" in envelope), "")
    environment.vlog(f"File could not be parsed, using its language header. {details}")
    return detect_language(source)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-f",
    "--file",
    type=click.Path(exists=True, dir_okay=False),
    metavar="",
    required=True,
    help="Path to Gherkin .feature file to translate.",
)
@click.option(
    "--language",
    metavar="",
    help="Dialect of the file. Defaults to the '# language:' header of the file, or English.",
)
@click.option("--output", type=click.Path(), metavar="", help="Optional output file path to save the translation.")
@click.pass_context
@pass_environment
def cli(environment: Environment, context: click.Context, file: str, output: str, **kwargs):
    """Translate Gherkin keywords to English

    Rewrites every line of a .feature file that starts with a keyword of its
    dialect so that it starts with the English keyword instead.
    """
    environment.cmd = "translate"
    environment.file = file
    environment.setup_logging()
    dialects = DialectRepository()

    try:
        envelopes = parse_file(file, ParseOptions(include_source=True, include_gherkin_document=True))
    except (OSError, UnicodeDecodeError) as e:
        environment.elog(FAULT_MAPPING["file_open_issue"].format(file_path=file))
        environment.elog(f"Error details:\n{e}")
        exit(1)
    source = envelopes[0]["source"]["data"]
    language = kwargs.get("language")
    if not language:
        language = document_language(envelopes, source, environment)
        if language is None:
            environment.elog(FAULT_MAPPING["unknown_language_header"].format(file_path=file))
            exit(1)
        environment.vlog(f"Detected language: {language}")

    if language not in dialects:
        environment.elog(FAULT_MAPPING["unknown_language"].format(language=language))
        exit(1)

    translation = translate_source(source, language, dialects)
    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(translation)
        except OSError as e:
            environment.elog(FAULT_MAPPING["output_write_issue"].format(file_path=output, error=e))
            exit(1)
        environment.log(f"Translated feature saved to: {output}")
    else:
        click.echo(translation, nl=False)
