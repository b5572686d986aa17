import featurescan

# Loosely matched so a screened "\n" in Windows paths still hits
DEPENDENCY_DIR_MARKER = "ode_modules"

WILDCARD_KEYWORD = "* "

PRIMARY_KEYWORDS = dict(
    given="Given",
    when="When",
    then="Then",
)

CONJUNCTION_KEYWORDS = ("and", "but")

FAULT_MAPPING = dict(
    no_files_matched="No feature files matched pattern '{pattern}' in '{work_dir}'.",
    unknown_language="Language '{language}' is not a known Gherkin dialect.",
    unknown_language_header="The '# language:' header of {file_path} names an unknown Gherkin dialect.",
    files_with_errors="{count} feature file(s) could not be analyzed.",
    yaml_file_parse_issue="Error occurred while parsing yaml file ({file_path}). "
    "Make sure that structure of a file is correct.\nWe expect only `key: value`, `---` and `...`.",
    file_open_issue="Error occurred while opening the file ({file_path}). "
    "Make sure that the file exists or the path is correct.",
    output_write_issue="Error occurred while writing the output file ({file_path}): {error}",
)

DIAGNOSTIC_MESSAGES = dict(
    empty_scenario="Title of scenario cannot be empty",
    empty_feature="Title for feature is empty",
    conjunction_without_primary='Got conjunction keyword "{keyword}" without prior non-conjunction keyword',
    unknown_keyword='Unknown keyword "{keyword}"',
    skipping_step='Skipping step "{keyword}{text}"',
    wrong_format="Wrong format, so skipping this: {details}",
    collaborator_fault="Parser failed on this file: {details}",
)

FEATURE_ERRORS = dict(
    empty_feature="{file_name} : Empty feature",
    malformed="{file_name} : {details}",
)

TOOL_VERSION = f"""featurescan v{featurescan.__version__}
Gherkin feature analyzer"""
TOOL_USAGE = f"""Supported and loaded modules:
    - analyze: Extract features, scenarios and steps from .feature files
    - translate: Rewrite a .feature file with English keywords"""

MISSING_COMMAND_SLOGAN = """Usage: featurescan [OPTIONS] COMMAND [ARGS]...\nTry 'featurescan --help' for help.
\nError: Missing command."""
