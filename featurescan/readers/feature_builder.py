from beartype.typing import List, Optional

from featurescan.constants import DEPENDENCY_DIR_MARKER, DIAGNOSTIC_MESSAGES, FEATURE_ERRORS
from featurescan.data_classes.analysis_exception import CollaboratorFault
from featurescan.data_classes.dataclass_feature import FeatureOutcome, FeatureRecord
from featurescan.logging import get_logger
from featurescan.readers import gherkin_source
from featurescan.readers.file_parser import FileParser
from featurescan.readers.gherkin_source import Envelope, ParseOptions
from featurescan.readers.scenario_extractor import ScenarioExtractor, get_location, get_title, strip_tags

# Pickles are requested to match the reference envelope stream, they are never read
PARSE_OPTIONS = ParseOptions(include_source=True, include_gherkin_document=True, include_pickles=True)


class FeatureBuilder(FileParser):
    """Parser turning one .feature file into a FeatureRecord"""

    def __init__(self, filepath, config):
        super().__init__(filepath, config)
        self.diagnostics = config.diagnostics
        self.extractor = ScenarioExtractor(config.dialects, config.diagnostics)
        self.logger = get_logger("featurescan.readers").with_context(file=self.file_name)

    def is_dependency_path(self) -> bool:
        return DEPENDENCY_DIR_MARKER in self.file_name

    async def parse_file(self) -> Optional[FeatureOutcome]:
        """Builds the outcome for this file, or None for files inside dependency folders.

        Exceptions raised while parsing are returned as a fault with an error
        record so the other files of the run are not affected.
        """
        if self.is_dependency_path():
            return None

        self.logger.debug("Parsing feature file")
        try:
            envelopes = [envelope async for envelope in gherkin_source.parse([self.filepath], PARSE_OPTIONS)]
        except Exception as e:
            self.logger.error("Parser failed", exc_info=True)
            fault = CollaboratorFault(self.file_name, str(e))
            self.diagnostics.error(DIAGNOSTIC_MESSAGES["collaborator_fault"].format(details=e), file=self.file_name)
            return FeatureOutcome.from_fault(fault)

        record = self.build_record(envelopes)
        self.logger.info("Feature file analyzed", scenarios=len(record.scenarios), error=record.error)
        return FeatureOutcome(file=self.file_name, record=record)

    def build_record(self, envelopes: List[Envelope]) -> FeatureRecord:
        source = next((envelope["source"]["data"] for envelope in envelopes if "source" in envelope), "")
        document = next((envelope["gherkinDocument"] for envelope in envelopes if "gherkinDocument" in envelope), None)

        if document is None:
            details = next((envelope["attachment"]["data"] for envelope in envelopes if "attachment" in envelope), "")
            self.diagnostics.error(DIAGNOSTIC_MESSAGES["wrong_format"].format(details=details), file=self.file_name)
            return FeatureRecord(error=FEATURE_ERRORS["malformed"].format(file_name=self.file_name, details=details))

        feature = document.get("feature")
        if feature is None:
            # Blank file: a document without a feature is reported like an untitled one
            self.diagnostics.warning(DIAGNOSTIC_MESSAGES["empty_feature"], file=self.file_name)
            return FeatureRecord(
                feature="", tags=[], scenario=[], error=FEATURE_ERRORS["empty_feature"].format(file_name=self.file_name)
            )

        title = get_title(feature)
        error = None
        if not title:
            self.diagnostics.warning(DIAGNOSTIC_MESSAGES["empty_feature"], file=self.file_name)
            error = FEATURE_ERRORS["empty_feature"].format(file_name=self.file_name)

        return FeatureRecord(
            feature=title,
            line=get_location(feature) + 1,
            tags=strip_tags(feature),
            scenario=self.extractor.extract(source, feature, str(self.filepath), self.config.work_dir),
            error=error,
        )


async def build_feature(file_path, config) -> Optional[FeatureOutcome]:
    return await FeatureBuilder(file_path, config).parse_file()
