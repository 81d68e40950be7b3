"""Configuration objects for record-store."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ReadAction:
    """Configuration for reading records."""

    skip_invalid: bool = True
    """Log and skip documents that can't be parsed instead of failing."""


@dataclass
class LoadOptions:
    """Options for loading records from the filesystem.

    Attributes:
        path: Filesystem path to load records from. Can be a file or directory.
        recursive: If True and path is a directory, load records from all
                  subdirectories as well.
    """

    path: Path
    recursive: bool = True

    def __post_init__(self) -> None:
        """Resolve the path after initialization."""
        self.path = Path(self.path).expanduser().resolve()
