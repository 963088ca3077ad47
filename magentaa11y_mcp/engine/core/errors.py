"""Error taxonomy for content indexing and retrieval."""


class ContentError(Exception):
    """Base class for content engine errors."""


class InitializationError(ContentError):
    """The content index could not be built (or has not been built yet).

    Fatal: no query can be served until this is resolved.
    """


class NotFoundError(ContentError):
    """A requested component or document does not exist."""


class ComponentNotFoundError(NotFoundError):
    """Component name is absent from the platform index."""

    def __init__(self, platform: str, name: str):
        self.platform = platform
        self.name = name
        super().__init__(f"Component '{name}' not found")


class DocumentNotFoundError(NotFoundError):
    """Document path does not resolve to a file under the content root."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Document '{path}' not found")


class FormatUnavailableError(ContentError):
    """Component exists but the requested front-matter format is absent."""

    def __init__(self, platform: str, name: str, format: str, available: list[str]):
        self.platform = platform
        self.name = name
        self.format = format
        self.available = available
        super().__init__(f"Format '{format}' not available for component '{name}'")


class PartialIndexWarning(UserWarning):
    """A platform or category directory could not be indexed.

    Recorded on the index and logged; never raised to callers.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
