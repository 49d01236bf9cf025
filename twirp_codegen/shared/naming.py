"""Naming utilities for code generation."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=1024)
def to_camel_case(value: str) -> str:
    """Convert an identifier to CamelCase.

    Only underscores delimit words. Each word gets its first character
    uppercased and keeps the rest untouched, so embedded case changes and
    digits survive as written.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> to_camel_case("hello_world")
        'HelloWorld'
        >>> to_camel_case("myLong_miXEDName")
        'MyLongMiXEDName'
        >>> to_camel_case("a_2z")
        'A2z'
    """
    return "".join(part[:1].upper() + part[1:] for part in value.split("_"))


@lru_cache(maxsize=1024)
def to_snake_case(value: str) -> str:
    """Convert an identifier to snake_case.

    Every uppercase letter becomes its own lowercase word boundary unless it
    opens the identifier or already follows an underscore.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> to_snake_case("HelloWorld")
        'hello_world'
        >>> to_snake_case("myLong_miXEDName")
        'my_long_mi_x_e_d_name'
    """
    out: list[str] = []
    for index, char in enumerate(value):
        if char.isupper():
            if index > 0 and value[index - 1] != "_":
                out.append("_")
            out.append(char.lower())
        else:
            out.append(char)
    return "".join(out)
