"""Error types shared by the HTTP service and the tool server."""


class BorrowersError(Exception):
    """Base class for borrowers API errors."""


class DataUnavailableError(BorrowersError):
    """The borrowers collection could not be obtained (file, network or status failure)."""


class UnknownToolError(BorrowersError):
    """A tool call named an operation that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
