"""Custom exceptions for the code generator."""

from __future__ import annotations


class CodegenError(Exception):
    """Base exception for code generation errors."""

    def __init__(self, message: str, file_name: str | None = None) -> None:
        self.file_name = file_name
        full_message = f"{message}" if not file_name else f"[{file_name}] {message}"
        super().__init__(full_message)


class ConfigurationError(CodegenError):
    """Raised when the requested generation cannot be configured."""


class DescriptorError(CodegenError):
    """Raised when descriptors or config files cannot be read or decoded."""


class UnresolvableReferenceError(CodegenError):
    """Raised when a method references a type missing from the loaded set."""

    def __init__(
        self,
        type_name: str,
        context: str,
        file_name: str | None = None,
    ) -> None:
        self.type_name = type_name
        super().__init__(f"Unable to resolve type '{type_name}' ({context})", file_name)
