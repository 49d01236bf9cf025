"""Immutable schema model shared by the loader, selector and emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

MESSAGE: str = "message"
ENUM: str = "enum"


@dataclass(frozen=True, slots=True)
class Definition:
    """A message or enum declared in a schema file."""

    name: str
    kind: str = MESSAGE
    nested: tuple[Definition, ...] = ()


@dataclass(frozen=True, slots=True)
class Method:
    """A single RPC of a service. Types are fully-qualified names."""

    name: str
    input_type: str
    output_type: str


@dataclass(frozen=True, slots=True)
class Service:
    name: str
    methods: tuple[Method, ...] = ()


@dataclass(frozen=True, slots=True)
class SchemaFile:
    """One loaded descriptor file."""

    name: str
    package: str = ""
    dependencies: tuple[str, ...] = ()
    definitions: tuple[Definition, ...] = ()
    services: tuple[Service, ...] = ()
    namespace_override: str | None = None


@dataclass(frozen=True, slots=True)
class TypeSymbol:
    """A message or enum addressable by its fully-qualified name."""

    full_name: str
    name: str
    file_name: str
    nesting: tuple[str, ...] = ()
    kind: str = MESSAGE


@dataclass(frozen=True, slots=True)
class GeneratedFile:
    """Output record for one generated source file."""

    name: str
    namespace: tuple[str, ...]
    content: str
    constants: tuple[str, ...] = ()


def iter_symbols(schema_file: SchemaFile) -> Iterator[TypeSymbol]:
    """Yield every message and enum of a file, nested ones included."""
    prefix = f".{schema_file.package}" if schema_file.package else ""

    def walk(definitions: Iterable[Definition], nesting: tuple[str, ...]) -> Iterator[TypeSymbol]:
        for definition in definitions:
            path = ".".join(nesting + (definition.name,))
            yield TypeSymbol(
                full_name=f"{prefix}.{path}",
                name=definition.name,
                file_name=schema_file.name,
                nesting=nesting,
                kind=definition.kind,
            )
            yield from walk(definition.nested, nesting + (definition.name,))

    yield from walk(schema_file.definitions, ())


@dataclass(frozen=True)
class SchemaRegistry:
    """Read-only lookup tables built once per generation run."""

    files: Mapping[str, SchemaFile] = field(default_factory=dict)
    symbols: Mapping[str, TypeSymbol] = field(default_factory=dict)

    @classmethod
    def build(cls, files: Iterable[SchemaFile]) -> SchemaRegistry:
        """Index files by name and their types by fully-qualified name."""
        by_name: dict[str, SchemaFile] = {}
        symbols: dict[str, TypeSymbol] = {}
        for schema_file in files:
            by_name[schema_file.name] = schema_file
            for symbol in iter_symbols(schema_file):
                symbols[symbol.full_name] = symbol
        return cls(files=MappingProxyType(by_name), symbols=MappingProxyType(symbols))

    def lookup(self, full_name: str) -> TypeSymbol | None:
        return self.symbols.get(full_name)

    def __len__(self) -> int:
        return len(self.files)
