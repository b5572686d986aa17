import json
import click

from featurescan.analyzer import analyze, find_feature_files
from featurescan.cli import pass_environment, Environment, CONTEXT_SETTINGS
from featurescan.constants import FAULT_MAPPING
from featurescan.data_classes.dataclass_feature import AnalysisResult
from featurescan.settings import DEFAULT_PATTERN, DEFAULT_WORK_DIR


def build_output(result: AnalysisResult, environment: Environment) -> dict:
    output_data = result.to_dict()
    output_data["summary"] = {
        "total_features": len(result.features),
        "total_scenarios": len(result.scenarios),
        "total_errors": sum(1 for feature in result.features if feature.error),
        "total_faults": len(result.faults),
        "pattern": environment.pattern,
        "work_dir": environment.dir,
    }
    return output_data


def print_report(result: AnalysisResult, environment: Environment):
    for outcome in result.outcomes:
        environment.vlog("___________________________\n")
        environment.vlog(f" File : {outcome.file}\n")
        if outcome.record.error:
            environment.vlog(f"  ! {outcome.record.error}")
        if outcome.record.feature:
            environment.vlog(f"= {outcome.record.feature}")
        for scenario in outcome.record.scenarios:
            environment.vlog(f" -  {scenario.name}")
    for diagnostic in result.diagnostics:
        location = f"{diagnostic.file}:{diagnostic.line}" if diagnostic.line else diagnostic.file
        environment.vlog(f"[{diagnostic.severity}] {location or '-'} {diagnostic.message}")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-p",
    "--pattern",
    metavar="",
    default=DEFAULT_PATTERN,
    show_default=True,
    help="Glob pattern of the feature files, relative to --dir.",
)
@click.option(
    "-d",
    "--dir",
    type=click.Path(exists=True, file_okay=False),
    metavar="",
    default=DEFAULT_WORK_DIR,
    show_default=True,
    help="Directory to search feature files in. Reported paths are relative to it.",
)
@click.option("--output", type=click.Path(), metavar="", help="Optional output file path to save the JSON result.")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output with indentation.")
@click.option("--fail-on-error", is_flag=True, help="Exit with code 1 if any feature file could not be analyzed.")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging output.")
@click.pass_context
@pass_environment
def cli(environment: Environment, context: click.Context, pattern: str, dir: str, output: str, pretty: bool, **kwargs):
    """Analyze Gherkin .feature files

    Extracts features, scenarios and steps from every matching file. Keywords
    of any Gherkin dialect are normalized to Given, When and Then, and each
    scenario's source is returned with English keywords.
    """
    environment.cmd = "analyze"
    environment.pattern = pattern
    environment.dir = dir
    if kwargs.get("verbose"):
        environment.verbose = True
    environment.setup_logging()

    environment.vlog("\n Parsing files\n")
    files = find_feature_files(pattern, dir)
    with environment.get_progress_bar(results_amount=len(files), prefix="Analyzing feature files") as progress_bar:
        result = analyze(pattern, dir, files=files, on_file_done=lambda file_path: progress_bar.update(1))

    if not files:
        environment.elog(FAULT_MAPPING["no_files_matched"].format(pattern=pattern, work_dir=dir))

    print_report(result, environment)

    output_data = build_output(result, environment)
    json_output = json.dumps(output_data, indent=2 if pretty else None, ensure_ascii=False)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(json_output)
        except OSError as e:
            environment.elog(FAULT_MAPPING["output_write_issue"].format(file_path=output, error=e))
            exit(1)
        environment.log(f"Analysis results saved to: {output}")
        environment.log(f"  Total features: {output_data['summary']['total_features']}")
        environment.log(f"  Total scenarios: {output_data['summary']['total_scenarios']}")
    else:
        click.echo(json_output)

    if kwargs.get("fail_on_error") and output_data["summary"]["total_errors"]:
        environment.elog(FAULT_MAPPING["files_with_errors"].format(count=output_data["summary"]["total_errors"]))
        exit(1)
