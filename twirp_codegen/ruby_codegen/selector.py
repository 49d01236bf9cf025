"""Selection of the descriptor files a run generates output for."""

from __future__ import annotations

from typing import Iterable, Mapping

from ..shared.descriptors import SchemaFile
from ..shared.errors import ConfigurationError


def select_files(entry_names: Iterable[str], files: Mapping[str, SchemaFile]) -> list[SchemaFile]:
    """Return the requested files in request order, without duplicates.

    Imported files that were not requested stay out of the result; they are
    only needed for type lookups.

    Raises:
        ConfigurationError: If any requested name was not loaded.
    """
    # Use dict to preserve order while deduplicating
    requested: dict[str, None] = dict.fromkeys(entry_names)

    missing = [name for name in requested if name not in files]
    if missing:
        raise ConfigurationError(
            f"File(s) not found in request: {', '.join(missing)}"
        )

    return [files[name] for name in requested]
