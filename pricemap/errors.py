"""Exception types for pricemap."""


class PriceMapError(Exception):
    """Base class for pricemap errors."""


class DiagramLoadError(PriceMapError):
    """A hall diagram could not be retrieved or parsed."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Failed to load diagram {source}: {message}")
