"""
Schema repository for the Ghostty configuration options.

The schema resource ships inside the package and is loaded once, before the
server answers any request. Loading failures are fatal: without a valid
schema there is nothing to complete.
"""

import functools
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple, Union

from jsonschema import ValidationError, validate

from .models import Option, TypeDefinitions, build_option, build_type_definitions

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent
DEFAULT_SCHEMA_PATH = SCHEMA_DIR / "ghostty-config.schema.json"
FORMAT_SCHEMA_PATH = SCHEMA_DIR / "schemas" / "ghostty-schema-format-1.json"


class SchemaLoadError(Exception):
    """Raised when the schema resource cannot be read, decoded or validated."""
    pass


def _reject_duplicate_keys(pairs):
    result = {}
    for key, value in pairs:
        if key in result:
            raise SchemaLoadError(f"Duplicate key '{key}' in schema resource")
        result[key] = value
    return result


class SchemaRepository:
    """
    Read-only view over the decoded schema.

    Options are kept in a read-only mapping sorted by key; the option records
    themselves are frozen. There are no mutation operations.
    """

    def __init__(self, options: Mapping[str, Option], types: Optional[TypeDefinitions] = None):
        self._options = MappingProxyType(dict(sorted(options.items())))
        self._types = types or TypeDefinitions()

    def get(self, key: str) -> Optional[Option]:
        """Look up an option by its exact key."""
        return self._options.get(key)

    def options(self) -> Iterator[Tuple[str, Option]]:
        """Iterate over all (key, option) pairs in key order."""
        return iter(self._options.items())

    @property
    def types(self) -> TypeDefinitions:
        return self._types

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, key: object) -> bool:
        return key in self._options

    @classmethod
    def from_dict(cls, data: dict) -> "SchemaRepository":
        """
        Build a repository from an already decoded schema document.

        Args:
            data: Decoded schema resource

        Returns:
            The repository

        Raises:
            SchemaLoadError: If the document does not match the schema format
        """
        with open(FORMAT_SCHEMA_PATH) as format_file:
            format_schema = json.load(format_file)

        try:
            validate(instance=data, schema=format_schema)
        except ValidationError as e:
            raise SchemaLoadError(f"Schema resource validation error: {e.message}") from e

        options = {key: build_option(key, entry) for key, entry in data["options"].items()}
        return cls(options, build_type_definitions(data.get("types")))


def load_schema(path: Optional[Union[str, Path]] = None) -> SchemaRepository:
    """
    Load and validate a schema resource.

    Args:
        path: Path of the resource, defaults to the packaged Ghostty schema

    Returns:
        The loaded SchemaRepository

    Raises:
        SchemaLoadError: If the resource is missing, malformed or invalid
    """
    schema_path = Path(path) if path else DEFAULT_SCHEMA_PATH

    try:
        with open(schema_path, encoding="utf-8") as schema_file:
            data = json.load(schema_file, object_pairs_hook=_reject_duplicate_keys)
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema resource {schema_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Cannot decode schema resource {schema_path}: {e}") from e

    repository = SchemaRepository.from_dict(data)
    logger.info(f"Loaded {len(repository)} options from {schema_path}")
    return repository


@functools.lru_cache(maxsize=None)
def default_schema() -> SchemaRepository:
    """The packaged schema, loaded on first use and shared by the whole process."""
    return load_schema()
