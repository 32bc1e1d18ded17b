"""Data model, parameter decoding, schema compiling and error builders for OpenAPI 3 validation."""

__version__ = "0.1.0"