"""Twirp Ruby code generator: a protoc plugin emitting Twirp services and clients."""

__version__ = "1.0.0"
