import logging
from dataclasses import dataclass

import pytest

from soapero.naming import (
    FileCategory,
    TypeMode,
    complex_type_header_path,
    element_cpp_file_name,
    element_define,
    element_header_file_name,
    element_header_path,
    header_path,
    service_define,
    simple_type_header_file_name,
    simple_type_header_path,
    simple_type_namespace,
    type_cpp_file_name,
    type_define,
    type_header_file_name,
    type_header_path,
)


@dataclass
class FakeType:
    namespace: str
    local_name: str
    type_mode: TypeMode = TypeMode.COMPLEX


@dataclass
class FakeSimpleType:
    namespace: str
    local_name: str
    typename: str
    exported_ns: str
    variable: bool = True
    type_mode: TypeMode = TypeMode.SIMPLE

    def has_variable_type(self):
        return self.variable

    def exported_typename(self):
        return self.typename

    def exported_namespace(self):
        return self.exported_ns


@dataclass
class FakeElement:
    namespace: str
    local_name: str


@dataclass
class FakeService:
    name: str


@pytest.mark.parametrize("origin", [FileCategory.TYPE, FileCategory.MESSAGE])
def test_header_path_climbs_from_nested_files(origin):
    path = header_path("tns", "types", "TNS-Foo.h", origin)
    assert path == "../../tns/types/TNS-Foo.h"


@pytest.mark.parametrize("origin", [FileCategory.SERVICE, FileCategory.UNKNOWN])
def test_header_path_from_root_does_not_climb(origin):
    path = header_path("tns", "types", "TNS-Foo.h", origin)
    assert not path.startswith("../")
    assert path.endswith("tns/types/TNS-Foo.h")


def test_header_path_lowercases_namespace():
    path = header_path("TNS", "messages", "TNS-Bar.h", FileCategory.TYPE)
    assert "/tns/messages/" in path


def test_simple_xs_type_header_has_no_prefix():
    simple = FakeSimpleType("tns", "Count", "Integer", "xsd")
    assert simple_type_header_path(simple, FileCategory.TYPE) == "../../xs/types/Integer.h"


def test_simple_type_without_variable_type_needs_no_header():
    simple = FakeSimpleType("tns", "Count", "Integer", "xs", variable=False)
    assert simple_type_header_path(simple, FileCategory.TYPE) == ""


@pytest.mark.parametrize("alias", ["xsd", "s", "xs"])
def test_simple_type_namespace_aliases(alias):
    simple = FakeSimpleType("tns", "Count", "Integer", alias)
    assert simple_type_namespace(simple) == "xs"


def test_simple_type_namespace_other_kept():
    simple = FakeSimpleType("tns", "Color", "Color", "tns")
    assert simple_type_namespace(simple) == "tns"
    assert simple_type_header_file_name(simple) == "TNS-Color.h"


def test_type_header_path_dispatches_on_mode():
    simple = FakeSimpleType("tns", "Count", "Integer", "s")
    complex_type = FakeType("tns", "Person")
    assert type_header_path(simple, FileCategory.TYPE) == simple_type_header_path(
        simple, FileCategory.TYPE
    )
    assert type_header_path(complex_type, FileCategory.SERVICE) == complex_type_header_path(
        complex_type, FileCategory.SERVICE
    )


def test_type_header_path_unknown_type_warns(caplog):
    unknown = FakeType("tns", "Mystery", TypeMode.UNKNOWN)
    with caplog.at_level(logging.WARNING):
        path = type_header_path(unknown, FileCategory.TYPE)
    assert path == "../../tns/types/TNS-Mystery.h"
    assert "Mystery" in caplog.text


def test_complex_type_header_path_uses_file_name():
    complex_type = FakeType("tns", "Person")
    path = complex_type_header_path(complex_type, FileCategory.MESSAGE)
    assert path.endswith("/" + type_header_file_name(complex_type))
    assert path.startswith("../../tns/types/")


def test_element_header_path_is_in_messages():
    element = FakeElement("tns", "Add")
    path = element_header_path(element, FileCategory.TYPE)
    assert path == "../../tns/messages/" + element_header_file_name(element)


def test_file_names_share_stem():
    type_ = FakeType("tns", "Person")
    element = FakeElement("tns", "AddResponse")
    assert type_header_file_name(type_)[:-2] == type_cpp_file_name(type_)[:-4]
    assert type_cpp_file_name(type_).endswith(".cpp")
    assert element_header_file_name(element).endswith(".h")
    assert element_cpp_file_name(element)[:-4] == element_header_file_name(element)[:-2]


def test_type_define_full():
    assert type_define("my-prefix", FakeType("tns", "Foo.Bar")) == "MY_PREFIX_TNS_TYPES_FOO_BAR_H_"


def test_type_define_without_prefix_or_namespace():
    define = type_define("", FakeType("", "Foo"))
    assert define.startswith("TYPES_")
    assert define.endswith("_H_")


def test_type_define_empty_local_name():
    assert type_define("", FakeType("", "")) == "TYPES_H_"


def test_element_define_uses_msg():
    define = element_define("calc", FakeElement("tns", "Add"))
    assert define.startswith("CALC_TNS_MSG_")
    assert define.endswith("H_")
    assert define.isupper()


def test_service_define():
    assert service_define("", FakeService("CalculatorService")) == "CALCULATORSERVICE_H_"
    assert service_define("x", FakeService("")).endswith("H_")