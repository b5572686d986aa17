from dataclasses import dataclass
from beartype.typing import List, Optional

from serde import field, serialize, deserialize, to_dict

from featurescan.constants import FEATURE_ERRORS
from featurescan.data_classes.analysis_exception import CollaboratorFault
from featurescan.data_classes.diagnostics import Diagnostic


@serialize
@deserialize
@dataclass(frozen=True)
class FeatureStep:
    """Step with its keyword resolved to Given, When or Then"""

    keyword: str
    title: str


@serialize
@deserialize
@dataclass(frozen=True)
class ScenarioRecord:
    """Class for storing one scenario together with its translated source slice"""

    name: str
    file: str
    line: int
    tags: List[str] = field(default_factory=list)
    code: str = ""
    steps: List[FeatureStep] = field(default_factory=list)


@serialize
@deserialize
@dataclass(frozen=True)
class FeatureRecord:
    """Class for storing the analysis of one feature file.

    A well-formed file fills feature, line, tags and scenario. A malformed one
    only carries error. An untitled feature carries both feature and error.
    """

    feature: Optional[str] = field(default=None, skip_if_default=True)
    line: Optional[int] = field(default=None, skip_if_default=True)
    tags: Optional[List[str]] = field(default=None, skip_if_default=True)
    scenario: Optional[List[ScenarioRecord]] = field(default=None, skip_if_default=True)
    error: Optional[str] = field(default=None, skip_if_default=True)

    @property
    def scenarios(self) -> List[ScenarioRecord]:
        return self.scenario or []

    def to_dict(self) -> dict:
        return to_dict(self)


@dataclass(frozen=True)
class FeatureOutcome:
    """Result of building one file: always a record, plus the fault that produced it, if any"""

    file: str
    record: FeatureRecord
    fault: Optional[CollaboratorFault] = None

    @classmethod
    def from_fault(cls, fault: CollaboratorFault) -> "FeatureOutcome":
        error = FEATURE_ERRORS["malformed"].format(file_name=fault.file_name, details=fault.reason)
        return cls(file=fault.file_name, record=FeatureRecord(error=error), fault=fault)

    @property
    def ok(self) -> bool:
        return self.fault is None


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregated result of analyzing every matched file, in discovery order"""

    outcomes: List[FeatureOutcome]
    diagnostics: List[Diagnostic]

    @property
    def features(self) -> List[FeatureRecord]:
        return [outcome.record for outcome in self.outcomes]

    @property
    def faults(self) -> List[CollaboratorFault]:
        return [outcome.fault for outcome in self.outcomes if outcome.fault is not None]

    @property
    def scenarios(self) -> List[ScenarioRecord]:
        return [scenario for feature in self.features for scenario in feature.scenarios]

    def to_dict(self) -> dict:
        return {
            "features": [feature.to_dict() for feature in self.features],
            "diagnostics": [to_dict(diagnostic) for diagnostic in self.diagnostics],
        }
