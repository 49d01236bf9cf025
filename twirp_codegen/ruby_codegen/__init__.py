"""Ruby Code Generator - Generates Twirp services and clients from proto descriptors."""

from .main import (
    GeneratorContext,
    Rpc,
    ServiceSpec,
    emit_file,
    generate,
    no_extension,
    only_base,
    output_name,
    write_files,
)
from .namespaces import namespace_for, split_ruby_constants, to_ruby_type
from .selector import select_files

__all__ = [
    "GeneratorContext",
    "Rpc",
    "ServiceSpec",
    "emit_file",
    "generate",
    "no_extension",
    "only_base",
    "output_name",
    "write_files",
    "namespace_for",
    "split_ruby_constants",
    "to_ruby_type",
    "select_files",
]
