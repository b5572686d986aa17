import os
from abc import abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from beartype.typing import Optional, Union

from featurescan.data_classes.dataclass_feature import FeatureOutcome
from featurescan.data_classes.diagnostics import DiagnosticsCollector
from featurescan.readers.dialect_repository import DialectRepository
from featurescan.settings import DEFAULT_WORK_DIR


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings shared by every file of one analysis run. Never changed once the run starts."""

    work_dir: str = DEFAULT_WORK_DIR
    dialects: DialectRepository = field(default_factory=DialectRepository)
    diagnostics: DiagnosticsCollector = field(default_factory=DiagnosticsCollector)


class FileParser:
    """
    Each new parser should inherit from this class, to make file reading modular.
    """

    def __init__(self, filepath: Union[str, Path], config: AnalysisConfig):
        self.filepath = Path(filepath)
        self.config = config
        self.file_name = os.path.relpath(self.filepath, config.work_dir)

    @abstractmethod
    async def parse_file(self) -> Optional[FeatureOutcome]:
        raise NotImplementedError
