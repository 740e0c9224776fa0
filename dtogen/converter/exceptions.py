"""Errors raised by the entity-to-DTO converter."""

PARSE_ERROR_MESSAGE = "Could not parse entity class name. Ensure it uses `export class NameEntity`."


class EntityParseError(ValueError):
    """Raised when source text holds no exported class declaration."""

    def __init__(self, message: str = PARSE_ERROR_MESSAGE, source_path: str = ""):
        self.source_path = source_path
        if source_path:
            message = f"{source_path}: {message}"
        super().__init__(message)
