"""Error kinds raised by the derivation and compositing pipeline.

Every error carries enough context (Viking number, slot, offending path) for a
caller to log it and decide between skipping and aborting a batch run.
"""

from pathlib import Path


class VikingError(Exception):
    """Base class for all pipeline errors."""

    def __init__(
        self,
        message: str,
        *,
        number: int | None = None,
        slot: str | None = None,
        path: Path | str | None = None,
    ) -> None:
        self.message = message
        self.number = number
        self.slot = slot
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        context = []
        if self.number is not None:
            context.append(f"number={self.number}")
        if self.slot is not None:
            context.append(f"slot={self.slot}")
        if self.path is not None:
            context.append(f"path={self.path}")
        if context:
            return f"{self.message} [{', '.join(context)}]"
        return self.message


class MalformedInputError(VikingError):
    """Raw contract data out of range or not splittable into 4 digit pairs."""


class MissingAssetError(VikingError):
    """One or more part images do not exist at composite time."""

    def __init__(self, paths: list[Path], *, number: int | None = None) -> None:
        self.paths = list(paths)
        listing = ", ".join(str(p) for p in self.paths)
        super().__init__(f"Missing asset file(s): {listing}", number=number)


class CompositeError(VikingError):
    """Pillow failed to read, combine or write the composite."""


class DuplicateVikingError(VikingError):
    """A record for this number already exists."""
