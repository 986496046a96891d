"""XML Schema value types and naming, path and build-file helpers for generated C++ SOAP clients."""

__version__ = "1.0.0"