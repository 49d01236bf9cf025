"""
Ruby Code Generator - Generates Twirp service and client classes from proto descriptors.

This module provides:
- Minimal Ruby qualification of request/response types
- Template pre-compilation
- Optional parallel rendering with deterministic output order
"""

from __future__ import annotations

import argparse
import posixpath
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .. import __version__
from ..shared import (
    CodegenError,
    ConfigurationError,
    GeneratedFile,
    GeneratorOptions,
    SchemaFile,
    SchemaRegistry,
    UnresolvableReferenceError,
    build_registry,
    load_config,
    load_descriptor_set,
    options_from_config,
    to_camel_case,
    to_snake_case,
)
from ..shared.logging_config import configure_logging, get_logger
from .namespaces import namespace_for, to_ruby_type
from .selector import select_files

logger = get_logger(__name__)

# Template configuration
TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"

OUTPUT_SUFFIX: Final[str] = "_twirp.rb"
PB_SUFFIX: Final[str] = "_pb.rb"


@dataclass(frozen=True, slots=True)
class Rpc:
    """One ``rpc`` line of a generated service class."""

    name: str
    input_type: str
    output_type: str
    ruby_method: str


@dataclass(frozen=True, slots=True)
class ServiceSpec:
    """A service as rendered: Ruby class name plus its rpcs."""

    name: str
    class_name: str
    rpcs: tuple[Rpc, ...]


@dataclass
class GeneratorContext:
    """Context for code generation with cached resources."""

    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,  # Disable auto-reload for performance
        )
        # Pre-compile templates
        self._service_template = self.template_env.get_template("service_twirp.rb.j2")

    @property
    def service_template(self):
        return self._service_template


def no_extension(path: str) -> str:
    """Strip the final extension: ``my/filename.txt`` -> ``my/filename``."""
    return posixpath.splitext(path)[0]


def only_base(path: str) -> str:
    """Last path component: ``/long/path/foo_bar.txt`` -> ``foo_bar.txt``."""
    return posixpath.basename(path)


def output_name(file_name: str) -> str:
    return no_extension(file_name) + OUTPUT_SUFFIX


def pb_require_path(file_name: str) -> str:
    """Sibling file holding the message classes, as ``require_relative`` sees it."""
    return no_extension(only_base(file_name)) + PB_SUFFIX


def _resolve(
    type_name: str,
    namespace: Sequence[str],
    registry: SchemaRegistry,
    context: str,
    file_name: str,
) -> str:
    if registry.lookup(type_name) is None:
        raise UnresolvableReferenceError(type_name, context, file_name)
    return to_ruby_type(type_name, namespace)


def build_services(
    schema_file: SchemaFile,
    namespace: Sequence[str],
    registry: SchemaRegistry,
) -> list[ServiceSpec]:
    """Resolve every rpc of every service in declaration order."""
    services: list[ServiceSpec] = []
    for service in schema_file.services:
        rpcs = tuple(
            Rpc(
                name=method.name,
                input_type=_resolve(
                    method.input_type, namespace, registry,
                    f"input of {service.name}.{method.name}", schema_file.name,
                ),
                output_type=_resolve(
                    method.output_type, namespace, registry,
                    f"output of {service.name}.{method.name}", schema_file.name,
                ),
                ruby_method=to_snake_case(method.name),
            )
            for method in service.methods
        )
        services.append(ServiceSpec(
            name=service.name,
            class_name=to_camel_case(service.name),
            rpcs=rpcs,
        ))
    return services


def top_level_constants(schema_file: SchemaFile) -> tuple[str, ...]:
    """Ruby constant names of the messages and enums a file declares directly."""
    return tuple(to_camel_case(definition.name) for definition in schema_file.definitions)


def render_file(
    ctx: GeneratorContext,
    schema_file: SchemaFile,
    namespace: Sequence[str],
    services: list[ServiceSpec],
) -> str:
    """Render the ``_twirp.rb`` source for one file."""
    return ctx.service_template.render(
        version=__version__,
        pb_require=pb_require_path(schema_file.name),
        modules=list(namespace),
        package=schema_file.package,
        services=services,
    )


def emit_file(
    schema_file: SchemaFile,
    registry: SchemaRegistry,
    ctx: GeneratorContext,
) -> GeneratedFile:
    """Produce the generated record for a single selected file."""
    namespace = namespace_for(schema_file)
    services = build_services(schema_file, namespace, registry)
    logger.debug(
        "Rendering %s in %s (%d service(s))",
        schema_file.name, "::".join(namespace) or "<top level>", len(services),
    )
    return GeneratedFile(
        name=output_name(schema_file.name),
        namespace=namespace,
        content=render_file(ctx, schema_file, namespace, services),
        constants=top_level_constants(schema_file),
    )


def generate(
    entry_names: Sequence[str],
    registry: SchemaRegistry,
    options: GeneratorOptions | None = None,
    ctx: GeneratorContext | None = None,
) -> list[GeneratedFile]:
    """Generate one record per requested file, in request order.

    Raises:
        ConfigurationError: If a requested file was not loaded.
        UnresolvableReferenceError: If an rpc type is missing from the loaded set.
    """
    options = options or GeneratorOptions()
    ctx = ctx or GeneratorContext()
    if options.max_workers is not None and not options.parallel:
        logger.warning("Ignoring workers=%d: parallel rendering is off", options.max_workers)

    selected = select_files(entry_names, registry.files)
    if options.skip_empty:
        skipped = [f.name for f in selected if not f.services]
        if skipped:
            logger.info("Skipping file(s) without services: %s", ", ".join(skipped))
        selected = [f for f in selected if f.services]

    if options.parallel and len(selected) > 1:
        with ThreadPoolExecutor(max_workers=options.max_workers) as executor:
            futures = [
                executor.submit(emit_file, schema_file, registry, ctx)
                for schema_file in selected
            ]
        # Surface the failure of the earliest requested file
        for future in futures:
            error = future.exception()
            if error is not None:
                raise error
        return [future.result() for future in futures]

    return [emit_file(schema_file, registry, ctx) for schema_file in selected]


def write_files(files: Sequence[GeneratedFile], output_dir: Path) -> list[Path]:
    """Write generated records below ``output_dir``, creating directories."""
    written: list[Path] = []
    for generated in files:
        target = output_dir / generated.name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
        written.append(target)
    return written


def _config_path(value: Any, config_path: Path | None) -> Path | None:
    """Resolve a path from the config file relative to that file."""
    if value is None:
        return None
    path = Path(value)
    if config_path is not None and not path.is_absolute():
        return config_path.parent / path
    return path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate Twirp Ruby code from a protoc descriptor set",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Proto file names to generate (as recorded in the descriptor set); "
        "defaults to every file in the set",
    )
    parser.add_argument(
        "--descriptor-set",
        type=Path,
        default=None,
        help="Binary FileDescriptorSet written by protoc --include_imports --descriptor_set_out",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory for generated files (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file; command line flags take precedence",
    )
    parser.add_argument(
        "--skip-empty",
        action="store_true",
        default=None,
        help="Do not generate files for protos without services",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=None,
        help="Render files in parallel",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum number of parallel workers",
    )

    args = parser.parse_args(argv)
    configure_logging()

    try:
        config = load_config(args.config) if args.config else {}
        options = options_from_config(config).merged(
            skip_empty=args.skip_empty,
            parallel=args.parallel,
            max_workers=args.workers,
        )

        descriptor_set = args.descriptor_set or _config_path(config.get("descriptor_set"), args.config)
        if descriptor_set is None:
            raise ConfigurationError("No descriptor set given (use --descriptor-set or config 'descriptor_set')")
        output_dir = args.out or _config_path(config.get("out"), args.config) or Path(".")

        protos = load_descriptor_set(descriptor_set)
        registry = build_registry(protos)
        entries = args.files or config.get("files") or [proto.name for proto in protos]

        generated = generate(entries, registry, options)
        write_files(generated, output_dir)

        print(
            f"Generated {len(generated)} file(s) from "
            f"{len(entries)} proto file(s) into {output_dir}"
        )
    except CodegenError as e:
        raise SystemExit(f"Error: {e}") from e


if __name__ == "__main__":
    main()
