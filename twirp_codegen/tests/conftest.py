from __future__ import annotations

import pytest
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from twirp_codegen.shared.descriptor_loader import build_registry
from twirp_codegen.tests.descriptor_builders import make_file


@pytest.fixture
def empty_proto() -> FileDescriptorProto:
    return make_file("google/protobuf/empty.proto", "google.protobuf", messages=["Empty"])


@pytest.fixture
def service_proto() -> FileDescriptorProto:
    return make_file(
        "example/hello_world/service.proto",
        "example.hello_world",
        messages=["HelloRequest", "HelloResponse"],
        services={"HelloWorld": [
            ("Hello", ".example.hello_world.HelloRequest", ".example.hello_world.HelloResponse"),
        ]},
    )


@pytest.fixture
def rubytypes_protos(empty_proto) -> list[FileDescriptorProto]:
    foo = make_file("rubytypes/foo.proto", "twirp.rubytypes.foo", messages=["my_message"])
    p99 = make_file("rubytypes/p99.proto", "twirp.rubytypes.m.v.p99", messages=["hello_world"])
    main = make_file(
        "rubytypes.proto",
        "twirp.rubytypes",
        messages=["Msg"],
        services={"Rubytypes": [
            ("SendFoo", ".twirp.rubytypes.foo.my_message", ".google.protobuf.Empty"),
            ("SendHello", ".twirp.rubytypes.m.v.p99.hello_world", ".twirp.rubytypes.Msg"),
        ]},
        dependencies=["rubytypes/foo.proto", "rubytypes/p99.proto", "google/protobuf/empty.proto"],
    )
    return [empty_proto, foo, p99, main]


@pytest.fixture
def service_registry(service_proto, empty_proto):
    return build_registry([empty_proto, service_proto])


@pytest.fixture
def rubytypes_registry(rubytypes_protos):
    return build_registry(rubytypes_protos)
