# soapero

Building blocks for generating C++ SOAP client code: runtime values for the
XML Schema built-in types, and the naming, path and build-file rules for the
generated sources. The package has no dependencies outside the standard
library.

## Modules

### `soapero.xs_types`

Value classes for XML Schema built-in types. Every class derives from
`XsValue` and offers:

- `value` – a property; assigning it stores the value and clears the null flag.
  Values of the wrong kind raise `TypeError`; integers outside the type's range
  raise `ValueError`.
- `serialize()` – the value as schema text.
- `deserialize(node)` – reads an `xml.etree.ElementTree.Element` (all of its
  text) or a plain string holding an attribute value.
- `is_null()` – true while no value has been set.

The classes:

- `String`, and the text-held `AnySimpleType`, `AnyType`, `AnyURI`,
  `Base64Binary`, `HexBinary`, `NCName`, `QName`, `Token`. These are null while
  the value is `None`; deserialized text is stripped.
- `Boolean` – reads only the exact words `true` and `false`; other text leaves
  it unchanged.
- `Integer` (32-bit signed), `UnsignedInteger` and `NonNegativeInteger`
  (32-bit unsigned), `UnsignedLong` (64-bit unsigned; element text is read
  within the 32-bit unsigned range, attribute values within the full range).
  Unreadable or out-of-range text reads as 0.
- `Float` (kept at single precision) and `Double`; unreadable text reads as 0.
  Both serialize in `%g` form.
- `DateTime` – holds a `datetime`, reads ISO 8601 text and serializes as
  `YYYY-MM-DDThh:mm:ss`. Unreadable text gives a non-null value of `None`.
- `Duration` – keeps the lexical text as it is.

### `soapero.classname`

- `secure_string(text)` replaces every character that is not a letter, digit
  or underscore with `_`.
- `ClassCategory` (`UNKNOWN`, `TYPE`, `MESSAGE`) and the `Classname` dataclass,
  which splits a `prefix:local` name and builds C++ scoped names such as
  `TNS::TYPES::MyType` (`qualified_name()`, `name_with_namespace()`,
  `tag_qualified_name()`, `get_local_name(safe)`, `category_namespace()`).

### `soapero.file_helper`

- `build_path(base_directory, file_namespace, file_category, file_name)` –
  `<base>/<namespace, lower-cased>/<category>/<file>`, joined with forward
  slashes; an empty base gives a path starting with `./`.
- `build_file_name(file_namespace, base_name, extension)` –
  `<NAMESPACE>-<base_name>.<extension>`, without prefix when there is no
  namespace.
- `create_directory_for_file(file_path)` – creates the parent directory and
  returns it as a `Path`.
- `is_file_types(file_path)` / `is_file_message(file_path)` – whether a path
  lies in a `/types/` or `/messages/` directory.

### `soapero.naming`

Include paths, include guards and file names of the generated C++ files, with
the enums `FileCategory` (`UNKNOWN`, `TYPE`, `MESSAGE`, `SERVICE`) and
`TypeMode` (`UNKNOWN`, `SIMPLE`, `COMPLEX`). The functions take any object with
the attributes they read:

- types and message elements: `namespace` and `local_name`; types also
  `type_mode`;
- simple types additionally: `has_variable_type()`, `exported_typename()` and
  `exported_namespace()` (the aliases `xsd` and `s` are folded to `xs`, and
  `xs` file names carry no prefix);
- services: `name`.

Functions: `header_path`, `type_header_path`, `simple_type_header_path`,
`complex_type_header_path`, `element_header_path`, `type_define`,
`element_define`, `service_define`, `type_header_file_name`,
`type_cpp_file_name`, `simple_type_header_file_name`, `simple_type_namespace`,
`element_header_file_name`, `element_cpp_file_name`. Includes written from a
type or message file climb back with `../../` first.

### `soapero.file_builder`

`create_file_builder(file_type, name, dir_name, file_list)` returns a builder
whose `generate_file()` writes a summary of the generated files into
`dir_name` and returns its path, with CRLF line endings. The file list is
sorted in place when the builder is created.

- `FileType.DEFAULT` – `DefaultFileBuilder`, writes `resume.txt`.
- `FileType.CMAKE_LISTS` – `CMakeListsFileBuilder`, writes a `CMakeLists.txt`
  that groups the files into `TYPES_SRC`, `MESSAGES_SRC` and `SERVICES_SRC`
  and builds them as a library named after `name`.

## Example

```python
from dataclasses import dataclass
from xml.etree.ElementTree import fromstring

from soapero.classname import ClassCategory, Classname
from soapero.file_helper import build_file_name
from soapero.naming import FileCategory, TypeMode, type_define, type_header_path
from soapero.xs_types import Integer

value = Integer()
value.deserialize(fromstring("<a> 42 </a>"))
print(value.value, value.serialize())   # 42 42

print(build_file_name("tns", "MyType", "h"))   # TNS-MyType.h

name = Classname(ClassCategory.TYPE)
name.set_name("tns:My-Type")
print(name.qualified_name())   # TNS::TYPES::My_Type


@dataclass
class ComplexType:
    namespace: str
    local_name: str
    type_mode: TypeMode = TypeMode.COMPLEX


my_type = ComplexType("tns", "MyType")
print(type_define("", my_type))                           # TNS_TYPES_MYTYPE_H_
print(type_header_path(my_type, FileCategory.TYPE))       # ../../tns/types/TNS-MyType.h
```

## What the package does not do

It does not read WSDL or XML Schema documents into a model, and it does not
render the text of C++ headers and sources for types, messages and services;
callers supply their own model objects and use the naming and path rules
here. There is no command-line tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```