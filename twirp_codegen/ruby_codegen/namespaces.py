"""Ruby namespace computation and minimal type qualification."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from ..shared.descriptor_loader import NAMESPACE_SEPARATOR
from ..shared.descriptors import SchemaFile
from ..shared.naming import to_camel_case


@lru_cache(maxsize=512)
def _split_constants(dotted: str) -> tuple[str, ...]:
    return tuple(to_camel_case(part) for part in dotted.split(".") if part)


def split_ruby_constants(dotted: str) -> list[str]:
    """Split a dotted proto name into Ruby constant names.

    Examples:
        >>> split_ruby_constants("example.hello_world")
        ['Example', 'HelloWorld']
        >>> split_ruby_constants("")
        []
    """
    return list(_split_constants(dotted))


def namespace_for(schema_file: SchemaFile) -> tuple[str, ...]:
    """Ruby module path a file's generated code is nested in.

    An explicit ``ruby_package`` override is author text and is used
    verbatim; otherwise the proto package is converted segment by segment.
    """
    override = schema_file.namespace_override
    if override:
        return tuple(override.split(NAMESPACE_SEPARATOR))
    return _split_constants(schema_file.package)


def to_ruby_type(full_name: str, current_namespace: Sequence[str] = ()) -> str:
    """Shortest Ruby reference to ``full_name`` from inside ``current_namespace``.

    The leading modules shared with the current namespace are dropped;
    matching is whole-segment only.

    Examples:
        >>> to_ruby_type(".twirp.rubytypes.foo.my_message", ("Twirp", "Rubytypes"))
        'Foo::MyMessage'
        >>> to_ruby_type(".google.protobuf.Empty")
        'Google::Protobuf::Empty'
    """
    # Segments come from the proto package even when the defining file sets
    # ruby_package; only the emitted file's own modules honor the override.
    segments = _split_constants(full_name.removeprefix("."))
    if not segments:
        return ""

    shared = 0
    for ours, theirs in zip(segments, current_namespace):
        if ours != theirs:
            break
        shared += 1
    # A type always keeps at least its own name.
    shared = min(shared, len(segments) - 1)
    return NAMESPACE_SEPARATOR.join(segments[shared:])
