"""
YAML Mapper - Converts between YAML documents and typed pydantic records.

Parsing is all-or-nothing: a document either yields a fully validated record
or a ParseResult describing the failure. No exception escapes to the caller.
"""

from io import IOBase
from pathlib import Path
from typing import IO, Any, Generic, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from plexpurchases.models.results import ParseFailureReason, ParseResult
from plexpurchases.observability.logging import LogSink, get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

STRING_SOURCE = "<string>"
STREAM_SOURCE = "<stream>"
BYTES_SOURCE = "<bytes>"


class YamlMapper(Generic[ModelT]):
    """Reads and writes one pydantic model type as YAML."""

    def __init__(self, model: type[ModelT], logger: LogSink | None = None) -> None:
        """Initialize mapper for a model class."""
        self.model = model
        self.logger = logger or get_logger(__name__)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, source: Path | str | bytes | IO[Any]) -> ParseResult[ModelT]:
        """
        Parse a YAML source into a record.

        Args:
            source: a Path to a file, raw YAML text, raw YAML bytes,
                or an open text/binary stream

        Returns:
            ParseResult holding the record or the failure reason
        """
        if isinstance(source, Path):
            return self.parse_file(source)
        if isinstance(source, bytes):
            return self.parse_bytes(source)
        if isinstance(source, str):
            return self.parse_string(source)
        if isinstance(source, IOBase) or hasattr(source, "read"):
            return self.parse_stream(source)
        raise TypeError(f"Unsupported YAML source: {type(source).__name__}")

    def parse_file(self, path: Path) -> ParseResult[ModelT]:
        """Parse a YAML file."""
        source = str(path)
        if not path.exists():
            self.logger.warning("yaml_file_not_found", path=source)
            return ParseResult.failed(
                ParseFailureReason.FILE_NOT_FOUND, source, "file does not exist"
            )

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error("yaml_file_read_failed", path=source, error=str(e))
            return ParseResult.failed(ParseFailureReason.IO_ERROR, source, str(e))

        result = self._load(text, source)
        if result.ok:
            self.logger.debug("yaml_file_parsed", path=source)
        return result

    def parse_bytes(self, data: bytes) -> ParseResult[ModelT]:
        """Parse UTF-8 encoded YAML."""
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            self.logger.error("yaml_bytes_decode_failed", error=str(e))
            return ParseResult.failed(ParseFailureReason.IO_ERROR, BYTES_SOURCE, str(e))
        return self.parse_string(text)

    def parse_string(self, text: str) -> ParseResult[ModelT]:
        """Parse YAML text."""
        result = self._load(text, STRING_SOURCE)
        if result.ok:
            self.logger.debug("yaml_string_parsed")
        return result

    def parse_stream(self, stream: IO[Any]) -> ParseResult[ModelT]:
        """Parse YAML from an open text or binary stream."""
        try:
            content = stream.read()
            text = content.decode("utf-8") if isinstance(content, bytes) else content
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error("yaml_stream_read_failed", error=str(e))
            return ParseResult.failed(ParseFailureReason.IO_ERROR, STREAM_SOURCE, str(e))

        result = self._load(text, STREAM_SOURCE)
        if result.ok:
            self.logger.debug("yaml_stream_parsed")
        return result

    def _load(self, text: str, source: str) -> ParseResult[ModelT]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            self.logger.error("yaml_syntax_error", source=source, error=str(e))
            return ParseResult.failed(ParseFailureReason.YAML_SYNTAX, source, str(e))

        if not isinstance(data, dict):
            detail = f"expected a mapping at the top level, got {type(data).__name__}"
            self.logger.error("yaml_not_a_mapping", source=source, error=detail)
            return ParseResult.failed(ParseFailureReason.NOT_A_MAPPING, source, detail)

        try:
            record = self.model.model_validate(data)
        except ValidationError as e:
            self.logger.error(
                "yaml_schema_mismatch",
                source=source,
                model=self.model.__name__,
                errors=e.error_count(),
                error=str(e),
            )
            return ParseResult.failed(ParseFailureReason.SCHEMA_MISMATCH, source, str(e))

        return ParseResult.success(record)

    def is_valid_file(self, path: Path) -> bool:
        """Check that a file parses into the model."""
        return self.parse_file(path).ok

    def is_valid_string(self, text: str) -> bool:
        """Check that YAML text parses into the model."""
        return self.parse_string(text).ok

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self, record: ModelT) -> str | None:
        """
        Convert a record to YAML text.

        Keys follow field declaration order and use their YAML aliases.
        Unset optional fields are omitted.

        Returns:
            YAML text, or None if the record could not be serialized
        """
        try:
            data = record.model_dump(mode="json", by_alias=True, exclude_none=True)
            text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, width=4096)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            self.logger.error(
                "yaml_serialize_failed", model=type(record).__name__, error=str(e)
            )
            return None

        self.logger.debug("yaml_serialized", model=type(record).__name__)
        return text

    def write(self, path: Path, record: ModelT) -> bool:
        """
        Write a record to a YAML file, creating parent directories.

        Returns:
            True only if the whole file was written
        """
        text = self.serialize(record)
        if text is None:
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            self.logger.error("yaml_write_failed", path=str(path), error=str(e))
            return False

        self.logger.debug("yaml_written", path=str(path))
        return True

    def merge(self, base: ModelT, override: ModelT) -> ModelT | None:
        """
        Overlay the fields explicitly present on override onto base.

        A field counts as present if it was given when override was built,
        including fields read from its YAML source. Nested models are
        replaced whole, not merged.

        Returns:
            The merged record, or None if the result is not a valid record
        """
        merged = base.model_dump()
        merged.update(override.model_dump(exclude_unset=True))

        try:
            result = self.model.model_validate(merged)
        except ValidationError as e:
            self.logger.error("yaml_merge_failed", model=self.model.__name__, error=str(e))
            return None

        self.logger.debug("yaml_merged", model=self.model.__name__)
        return result
