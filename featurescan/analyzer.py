"""Analysis of every feature file matching a glob pattern."""

import asyncio
import glob
import os
from beartype.typing import Callable, List, Optional

from featurescan.data_classes.analysis_exception import CollaboratorFault
from featurescan.data_classes.dataclass_feature import AnalysisResult, FeatureOutcome
from featurescan.data_classes.diagnostics import DiagnosticsCollector
from featurescan.logging import get_logger
from featurescan.readers.dialect_repository import DialectRepository
from featurescan.readers.feature_builder import build_feature
from featurescan.readers.file_parser import AnalysisConfig
from featurescan.settings import DEFAULT_WORK_DIR

logger = get_logger("featurescan.analyzer")


def find_feature_files(file_pattern: str, work_dir: str = DEFAULT_WORK_DIR) -> List[str]:
    """Files matching file_pattern below work_dir, "**" included, in sorted order"""
    pattern = os.path.join(work_dir, file_pattern)
    return sorted(path for path in glob.glob(pattern, recursive=True) if os.path.isfile(path))


async def _build_all(
    files: List[str], config: AnalysisConfig, on_done: Optional[Callable[[str], None]]
) -> List[Optional[FeatureOutcome]]:
    async def build(file_path: str) -> Optional[FeatureOutcome]:
        try:
            return await build_feature(file_path, config)
        finally:
            if on_done is not None:
                on_done(file_path)

    raw_results = await asyncio.gather(*(build(file_path) for file_path in files), return_exceptions=True)

    outcomes = []
    for file_path, raw in zip(files, raw_results):
        # Faults are normally captured by the builder, anything left is still kept per file
        if isinstance(raw, Exception):
            raw = FeatureOutcome.from_fault(CollaboratorFault(os.path.relpath(file_path, config.work_dir), str(raw)))
            config.diagnostics.error(str(raw.fault), file=raw.file)
        elif isinstance(raw, BaseException):
            raise raw
        outcomes.append(raw)
    return outcomes


async def analyze_feature_files(
    file_pattern: str,
    work_dir: str = DEFAULT_WORK_DIR,
    dialects: Optional[DialectRepository] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
    on_file_done: Optional[Callable[[str], None]] = None,
    files: Optional[List[str]] = None,
) -> AnalysisResult:
    """Analyzes all feature files matching file_pattern in work_dir concurrently.

    :param file_pattern: glob pattern relative to work_dir, e.g. "**/*.feature"
    :param work_dir: directory the pattern and the reported file names are relative to
    :param dialects: keyword tables, gherkin-official dialects by default
    :param diagnostics: collector receiving warnings and errors, a new one by default
    :param on_file_done: called with each file path once its analysis finished
    :param files: already discovered files, globbed from file_pattern when omitted
    :return: one record per analyzed file in discovery order, plus the diagnostics
    """
    config = AnalysisConfig(
        work_dir=work_dir,
        dialects=dialects if dialects is not None else DialectRepository(),
        diagnostics=diagnostics if diagnostics is not None else DiagnosticsCollector(),
    )
    if files is None:
        files = find_feature_files(file_pattern, work_dir)
    logger.info("Parsing files", pattern=file_pattern, work_dir=work_dir, files=len(files))

    outcomes = [outcome for outcome in await _build_all(files, config, on_file_done) if outcome is not None]

    result = AnalysisResult(outcomes=outcomes, diagnostics=config.diagnostics.items)
    logger.info(
        "Analysis finished",
        features=len(outcomes),
        scenarios=len(result.scenarios),
        faults=len(result.faults),
        diagnostics=len(result.diagnostics),
    )
    return result


def analyze(file_pattern: str, work_dir: str = DEFAULT_WORK_DIR, **kwargs) -> AnalysisResult:
    """Synchronous entry point for analyze_feature_files"""
    return asyncio.run(analyze_feature_files(file_pattern, work_dir, **kwargs))
