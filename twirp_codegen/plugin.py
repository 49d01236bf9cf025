#!/usr/bin/env python3
"""
protoc-gen-twirp_ruby: A protoc plugin that generates Twirp services and clients for Ruby.

This plugin reads a CodeGeneratorRequest from stdin and writes a
CodeGeneratorResponse to stdout, following the protoc plugin protocol.

Usage:
    protoc --plugin=protoc-gen-twirp_ruby --ruby_out=./gen --twirp_ruby_out=./gen foo.proto
    protoc ... --twirp_ruby_opt=skip-empty ...
"""

from __future__ import annotations

import sys
from typing import BinaryIO

from google.protobuf.compiler import plugin_pb2 as plugin
from google.protobuf.message import DecodeError

from . import __version__
from .ruby_codegen.main import GeneratorContext, generate
from .shared import CodegenError, build_registry, parse_parameter
from .shared.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def handle_request(request: plugin.CodeGeneratorRequest) -> plugin.CodeGeneratorResponse:
    """Run one generation for a decoded request.

    Failures are reported through ``response.error`` with no files attached.
    """
    response = plugin.CodeGeneratorResponse()
    # Only services are emitted, so proto3 optional fields need no handling
    response.supported_features = plugin.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    try:
        options = parse_parameter(request.parameter)
        registry = build_registry(request.proto_file)
        generated = generate(list(request.file_to_generate), registry, options, GeneratorContext())
    except CodegenError as e:
        logger.error("%s", e)
        response.error = str(e)
        return response

    for record in generated:
        out_file = response.file.add()
        out_file.name = record.name
        out_file.content = record.content
    return response


def run(stdin: BinaryIO, stdout: BinaryIO) -> int:
    """Decode a request from ``stdin`` and encode the response to ``stdout``.

    Generation errors travel in ``response.error`` and still exit 0; protoc
    ignores the response of a plugin that exits non-zero.
    """
    request = plugin.CodeGeneratorRequest()
    try:
        request.ParseFromString(stdin.read())
    except DecodeError as e:
        logger.error("Invalid CodeGeneratorRequest: %s", e)
        return 1

    response = handle_request(request)
    stdout.write(response.SerializeToString())
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if "--version" in argv:
        print(f"protoc-gen-twirp_ruby {__version__}")
        return 0

    if sys.stdin.isatty():
        print("ERROR!: protoc-gen-twirp_ruby is a protoc plugin, it is not intended for direct use.", file=sys.stderr)
        print("", file=sys.stderr)
        print("Usage:", file=sys.stderr)
        print("  protoc --plugin=protoc-gen-twirp_ruby \\", file=sys.stderr)
        print("         --ruby_out=./gen --twirp_ruby_out=./gen \\", file=sys.stderr)
        print("         your_file.proto", file=sys.stderr)
        return 1

    configure_logging()
    return run(sys.stdin.buffer, sys.stdout.buffer)


if __name__ == "__main__":
    sys.exit(main())
