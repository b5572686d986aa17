import os
from beartype.typing import Any, Dict, List, Optional, Tuple

from featurescan.constants import DIAGNOSTIC_MESSAGES
from featurescan.data_classes.dataclass_feature import FeatureStep, ScenarioRecord
from featurescan.data_classes.diagnostics import DiagnosticsCollector
from featurescan.readers.dialect_repository import DialectRepository
from featurescan.readers.keyword_resolver import resolve_keyword
from featurescan.readers.line_translator import make_line_translator


def get_location(node: Dict[str, Any]) -> int:
    """Zero-based line a scenario or feature starts at, tags included"""
    tags = node.get("tags", [])
    if tags:
        return tags[0]["location"]["line"] - 1
    return node["location"]["line"] - 1


def get_title(node: Dict[str, Any]) -> str:
    """Name followed by the node's tags, e.g. "Search @smoke @fast" """
    name = node.get("name", "")
    for tag in node.get("tags", []):
        name = f"{name} {tag['name']}"
    return name


def strip_tags(node: Dict[str, Any]) -> List[str]:
    return [tag["name"][1:] for tag in node.get("tags", [])]


def scenario_ranges(feature: Dict[str, Any], line_count: int) -> List[Tuple[int, int]]:
    """Computes the [start, end) source lines of every scenario of a feature.

    A scenario ends where the next one starts, the last one at end of file.
    Backgrounds and rules are not scenarios and do not bound a range.
    """
    starts = [get_location(child["scenario"]) for child in feature.get("children", []) if "scenario" in child]
    ends = starts[1:] + [line_count]
    return list(zip(starts, ends))


class ScenarioExtractor:
    """Builds scenario records from the children of a parsed feature"""

    def __init__(self, dialects: DialectRepository, diagnostics: Optional[DiagnosticsCollector] = None):
        self.dialects = dialects
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticsCollector()

    def extract(self, source: str, feature: Dict[str, Any], file_path: str, work_dir: str) -> List[ScenarioRecord]:
        source_lines = source.split("\n")
        file_name = os.path.relpath(file_path, work_dir)
        dialect = self.dialects.get(feature.get("language"))
        translate = make_line_translator(dialect, self.dialects.english)

        scenarios = [child["scenario"] for child in feature.get("children", []) if "scenario" in child]
        ranges = scenario_ranges(feature, len(source_lines))

        records = []
        for scenario, (start, end) in zip(scenarios, ranges):
            if not scenario.get("name"):
                self.diagnostics.warning(
                    DIAGNOSTIC_MESSAGES["empty_scenario"], file=file_name, line=scenario["location"]["line"]
                )
            records.append(
                ScenarioRecord(
                    name=get_title(scenario),
                    file=file_name,
                    line=start,
                    tags=strip_tags(scenario),
                    code="\n".join(translate(line) for line in source_lines[start:end]),
                    steps=self._resolve_steps(scenario, dialect, file_name),
                )
            )
        return records

    def _resolve_steps(self, scenario: Dict[str, Any], dialect, file_name: str) -> List[FeatureStep]:
        steps = []
        previous_keyword = None
        for step in scenario.get("steps", []):
            line = step["location"]["line"]
            keyword = resolve_keyword(step["keyword"], previous_keyword, dialect, self.diagnostics, file_name, line)
            if keyword is None:
                self.diagnostics.warning(
                    DIAGNOSTIC_MESSAGES["skipping_step"].format(keyword=step["keyword"], text=step["text"]),
                    file=file_name,
                    line=line,
                )
                continue
            steps.append(FeatureStep(keyword=keyword, title=step["text"]))
            previous_keyword = keyword
        return steps
