"""Descriptor loading: protobuf descriptors into the immutable schema model."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    FileDescriptorProto,
    FileDescriptorSet,
)
from google.protobuf.message import DecodeError

from .descriptors import ENUM, MESSAGE, Definition, Method, SchemaFile, SchemaRegistry, Service
from .errors import DescriptorError
from .logging_config import get_logger

logger = get_logger(__name__)

NAMESPACE_SEPARATOR = "::"


def parse_namespace_override(raw: str | bytes | None, file_name: str | None = None) -> str | None:
    """Return a usable namespace override, or None when absent or malformed.

    Malformed values (undecodable bytes, blank text, empty ``::`` pieces or
    pieces with surrounding whitespace)
    fall back to the package-derived namespace instead of failing the run.
    """
    if raw is None:
        return None
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Ignoring undecodable ruby_package option in %s", file_name)
            return None

    value = raw.strip()
    if not value:
        return None
    if any(not piece or piece != piece.strip() for piece in value.split(NAMESPACE_SEPARATOR)):
        logger.warning("Ignoring malformed ruby_package option %r in %s", value, file_name)
        return None
    return value


def _message_definition(message: DescriptorProto) -> Definition:
    nested = [_message_definition(m) for m in message.nested_type]
    nested.extend(_enum_definition(e) for e in message.enum_type)
    return Definition(name=message.name, kind=MESSAGE, nested=tuple(nested))


def _enum_definition(enum: EnumDescriptorProto) -> Definition:
    return Definition(name=enum.name, kind=ENUM)


def schema_file_from_proto(proto: FileDescriptorProto) -> SchemaFile:
    """Convert a FileDescriptorProto into a SchemaFile."""
    definitions = [_message_definition(m) for m in proto.message_type]
    definitions.extend(_enum_definition(e) for e in proto.enum_type)

    services = tuple(
        Service(
            name=service.name,
            methods=tuple(
                Method(
                    name=method.name,
                    input_type=method.input_type,
                    output_type=method.output_type,
                )
                for method in service.method
            ),
        )
        for service in proto.service
    )

    override = None
    if proto.HasField("options") and proto.options.HasField("ruby_package"):
        override = parse_namespace_override(proto.options.ruby_package, proto.name)

    return SchemaFile(
        name=proto.name,
        package=proto.package,
        dependencies=tuple(proto.dependency),
        definitions=tuple(definitions),
        services=services,
        namespace_override=override,
    )


def build_registry(protos: Iterable[FileDescriptorProto]) -> SchemaRegistry:
    """Build the per-run registry from every loaded descriptor."""
    return SchemaRegistry.build(schema_file_from_proto(proto) for proto in protos)


def load_descriptor_set(path: Path) -> list[FileDescriptorProto]:
    """Load a binary FileDescriptorSet as written by ``protoc --descriptor_set_out``.

    Raises:
        DescriptorError: If the file cannot be read or decoded.
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise DescriptorError(f"Failed to read descriptor set: {e}", str(path)) from e

    descriptor_set = FileDescriptorSet()
    try:
        descriptor_set.ParseFromString(content)
    except DecodeError as e:
        raise DescriptorError(f"Invalid descriptor set: {e}", str(path)) from e

    return list(descriptor_set.file)
