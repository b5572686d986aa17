from dataclasses import dataclass
from beartype.typing import Iterator, List, Optional

from serde import field, serialize, deserialize

from featurescan.logging import get_logger


class Severity:

    WARNING = "warning"
    ERROR = "error"


@serialize
@deserialize
@dataclass(frozen=True)
class Diagnostic:
    """Human-readable message about a file, reported beside the analysis result"""

    severity: str
    message: str
    file: Optional[str] = field(default=None, skip_if_default=True)
    line: Optional[int] = field(default=None, skip_if_default=True)


class DiagnosticsCollector:
    """
    Ordered sink for diagnostics produced during an analysis run.

    Every diagnostic is kept in memory so callers can inspect, print or drop
    them, and is also forwarded to the "featurescan.diagnostics" logger.
    """

    def __init__(self):
        self._items: List[Diagnostic] = []
        self.logger = get_logger("featurescan.diagnostics")

    def add(self, severity: str, message: str, file: Optional[str] = None, line: Optional[int] = None) -> Diagnostic:
        diagnostic = Diagnostic(severity=severity, message=message, file=file, line=line)
        self._items.append(diagnostic)
        if severity == Severity.ERROR:
            self.logger.error(message, file=file, line=line)
        else:
            self.logger.warning(message, file=file, line=line)
        return diagnostic

    def warning(self, message: str, file: Optional[str] = None, line: Optional[int] = None) -> Diagnostic:
        return self.add(Severity.WARNING, message, file, line)

    def error(self, message: str, file: Optional[str] = None, line: Optional[int] = None) -> Diagnostic:
        return self.add(Severity.ERROR, message, file, line)

    @property
    def items(self) -> List[Diagnostic]:
        return list(self._items)

    def messages(self) -> List[str]:
        return [diagnostic.message for diagnostic in self._items]

    def for_file(self, file: str) -> List[Diagnostic]:
        return [diagnostic for diagnostic in self._items if diagnostic.file == file]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
