[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soapero"
version = "1.0.0"
description = "XML Schema value types and naming, path and build-file helpers for generated C++ SOAP clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["soap", "wsdl", "xsd", "xml-schema", "code-generation", "c++", "cmake"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soapero"]

[tool.pytest.ini_options]
addopts = "-ra"
