"""Shared utilities for the code generator."""

from .config import (
    GeneratorOptions,
    load_config,
    options_from_config,
    parse_parameter,
)
from .descriptor_loader import (
    build_registry,
    load_descriptor_set,
    parse_namespace_override,
    schema_file_from_proto,
)
from .descriptors import (
    Definition,
    GeneratedFile,
    Method,
    SchemaFile,
    SchemaRegistry,
    Service,
    TypeSymbol,
)
from .naming import (
    to_camel_case,
    to_snake_case,
)
from .errors import (
    CodegenError,
    ConfigurationError,
    DescriptorError,
    UnresolvableReferenceError,
)

__all__ = [
    # Configuration
    "GeneratorOptions",
    "load_config",
    "options_from_config",
    "parse_parameter",
    # Descriptor loading
    "build_registry",
    "load_descriptor_set",
    "parse_namespace_override",
    "schema_file_from_proto",
    # Schema model
    "Definition",
    "GeneratedFile",
    "Method",
    "SchemaFile",
    "SchemaRegistry",
    "Service",
    "TypeSymbol",
    # Naming utilities
    "to_camel_case",
    "to_snake_case",
    # Errors
    "CodegenError",
    "ConfigurationError",
    "DescriptorError",
    "UnresolvableReferenceError",
]
