from pathlib import Path

import pytest

from soapero.file_helper import (
    build_file_name,
    build_path,
    create_directory_for_file,
    is_file_message,
    is_file_types,
)


def test_build_file_name_with_namespace_prefix():
    name = build_file_name("tns", "AddResponse", "h")
    assert name.startswith("TNS-")
    assert name.endswith("AddResponse.h")
    assert name == "TNS-" + "AddResponse" + "." + "h"


def test_build_file_name_without_namespace():
    assert build_file_name("", "Service", "cpp") == "Service.cpp"


def test_build_path_full_layout():
    assert build_path("out", "Tns", "types", "TNS-Foo.h") == "out/tns/types/TNS-Foo.h"


def test_build_path_empty_base_is_current_directory():
    assert build_path("", "", "", "Calc.h") == "./Calc.h"


def test_build_path_relative_root_with_trailing_slash():
    assert build_path("../../", "xs", "types", "Integer.h") == "../../xs/types/Integer.h"


def test_build_path_skips_empty_parts():
    assert build_path("out", "", "messages", "M.h") == build_path("out/messages", "", "", "M.h")


def test_build_path_absolute_file_name_wins():
    assert build_path("out", "ns", "types", "/abs/x.h") == "/abs/x.h"


@pytest.mark.parametrize("category", ["types", "messages"])
def test_classification_of_built_paths(category):
    path = build_path("", "ns", category, "A.h")
    assert is_file_types(path) is (category == "types")
    assert is_file_message(path) is (category == "messages")


def test_classification_requires_slash_before_category():
    assert is_file_types("types/A.h") is False
    assert is_file_message("messages/A.h") is False
    assert is_file_types("/types/A.h") is True


def test_service_file_is_neither_type_nor_message():
    path = build_path("", "", "", "Calc.cpp")
    assert not is_file_types(path)
    assert not is_file_message(path)


def test_create_directory_for_file(tmp_path):
    target = tmp_path / "a" / "b" / "file.h"
    created = create_directory_for_file(str(target))
    assert created == target.parent
    assert target.parent.is_dir()
    # Calling again on an existing directory is fine.
    assert create_directory_for_file(target) == target.parent


def test_create_directory_for_bare_file_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    created = create_directory_for_file("file.h")
    assert Path(created).resolve() == tmp_path.resolve()


def test_create_directory_fails_under_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(OSError):
        create_directory_for_file(blocker / "sub" / "f.h")