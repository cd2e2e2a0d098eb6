"""Error types raised while loading, merging and saving registry files."""


class SeedMergeError(Exception):
    """Base exception for all fatal merge failures."""
    pass


class InputError(SeedMergeError):
    """A seed or registry file is missing, unreadable or not valid JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ShapeError(InputError):
    """The JSON parsed but lacks the structure the merge relies on."""
    pass


class WriteError(SeedMergeError):
    """The updated registry could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
