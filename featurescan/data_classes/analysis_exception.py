class CollaboratorFault(Exception):
    """Exception raised when the Gherkin parser fails while streaming a file.

    Attributes:
        file_name: feature file the parser was working on
        reason: text of the underlying exception
    """

    def __init__(self, file_name: str, reason=""):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Unable to parse {file_name}. {reason}")
