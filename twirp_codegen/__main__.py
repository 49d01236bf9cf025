#!/usr/bin/env python3
"""
Unified CLI for the Twirp Ruby code generator.

Usage:
    python -m twirp_codegen <command> [options]

Commands:
    plugin      Run as a protoc plugin (request on stdin, response on stdout)
    generate    Generate code from a descriptor set file
    version     Print the generator version

Examples:
    protoc --include_imports --descriptor_set_out=set.pb service.proto
    python -m twirp_codegen generate --descriptor-set set.pb --out gen service.proto
    python -m twirp_codegen generate --config twirp.yaml --skip-empty
"""

from __future__ import annotations

import sys

from twirp_codegen import __version__


def cmd_plugin(args: list[str]) -> int:
    """Run as a protoc plugin."""
    from twirp_codegen import plugin
    return plugin.main(args)


def cmd_generate(args: list[str]) -> int:
    """Generate code from a descriptor set."""
    from twirp_codegen.ruby_codegen.main import main as generate_main
    try:
        generate_main(args)
        return 0
    except SystemExit as e:
        if isinstance(e.code, str):
            print(e.code, file=sys.stderr)
            return 1
        return e.code if isinstance(e.code, int) else 1


def cmd_version(args: list[str]) -> int:
    """Print the version."""
    print(f"protoc-gen-twirp_ruby {__version__}")
    return 0


COMMANDS = {
    "plugin": (cmd_plugin, "Run as a protoc plugin"),
    "generate": (cmd_generate, "Generate code from a descriptor set file"),
    "version": (cmd_version, "Print the generator version"),
}


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(__doc__)
        print("Available commands:")
        for name, (_, desc) in COMMANDS.items():
            print(f"  {name:12} {desc}")
        print("\nUse '<command> --help' for command-specific options.")
        return 0

    command = sys.argv[1]
    args = sys.argv[2:]

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(f"Available commands: {', '.join(COMMANDS.keys())}")
        return 1

    handler, _ = COMMANDS[command]
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
