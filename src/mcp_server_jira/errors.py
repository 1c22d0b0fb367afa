"""Errors raised inside the tool dispatcher before a result is rendered."""


class ToolError(Exception):
    """Base exception for tool dispatch failures."""


class UnknownToolError(ToolError):
    """Raised when a call names a tool that is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentError(ToolError):
    """Raised when the arguments of a call do not match the tool's schema."""

    def __init__(self, name: str, details: str):
        self.name = name
        super().__init__(f"Invalid arguments for {name}: {details}")
