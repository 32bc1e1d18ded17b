# oas_validator

Building blocks for checking HTTP requests and responses against an OpenAPI 3
description. The package gives you a small, plain data model, helpers for
reading parameters and content types, and builders that turn failures into
readable `ValidationError` objects.

## Modules

- `oas_validator.config`: `ValidationOptions` (fields `regex_engine`,
  `format_assertions`, `content_assertions`), built with
  `new_validation_options(*options)` from `with_regex_engine(engine)`,
  `with_format_assertions()` and `with_content_assertions()`. Options that are
  `None` are skipped.
- `oas_validator.constants`: the validation type names, style names and
  delimiters used throughout, plus `IGNORE_REGEX` and `IGNORE_POLY_REGEX`.
- `oas_validator.model`: dataclasses `Position`, `Schema`, `Parameter`,
  `MediaType`, `RequestBody`, `Response`, `Responses`, `Operation`, `PathItem`,
  `SecurityRequirement`, `Request` and `HttpResponse`. `Parameter.is_exploded()`
  is true only when `explode` is explicitly true; `Request.get_header()` and
  `HttpResponse.get_header()` look headers up case-insensitively and return
  `""` when absent.
- `oas_validator.operations`: `extract_operation(request, item)` picks the
  operation for the request method (or `None`), and
  `extract_content_type(value)` returns `(media_type, charset, boundary)`,
  still returning the media type when the parameters are malformed.
- `oas_validator.regex_maker`: `get_regex_for_path(tpl)` compiles templates
  such as `/orders/{id:[0-9]+}` and `brace_indices(s)` finds brace groups.
  Malformed templates raise `PathTemplateError`.
- `oas_validator.params`: `QueryParam`, `extract_params_for_operation`,
  `extract_security_for_operation`, `cast_value`, and decoders for form, pipe,
  space, label, matrix, CSV and deepObject encodings, plus the
  `collapse_csv_into_*_style` helpers used in fix hints.
- `oas_validator.schema_compiler`: `new_compiled_schema(name, json_schema,
  options)` decodes a JSON Schema, checks it against its meta-schema, verifies
  that local `#/...` references resolve, and returns a `jsonschema` validator.
  With `format_assertions` on, formats are checked. Failures raise
  `SchemaCompileError`.
- `oas_validator.url_loader`: `HTTPURLLoader`, `FileLoader`,
  `new_http_url_loader(insecure)` (15 second timeout) and
  `new_compiler_loader()`, which returns loaders keyed by `file`, `http` and
  `https`. A failed load, or an HTTP status other than 200, raises `LoaderError`.
- `oas_validator.errors`: `ValidationError`, `SchemaValidationFailure`, the
  `HOW_TO_FIX_*` hint texts and `populate_validation_errors(errors, request,
  path)`.
- `oas_validator.request_errors`: builders for unknown request or response
  content types, missing operations and unknown response codes.
- `oas_validator.query_parameter_errors` and
  `oas_validator.location_parameter_errors`: builders for query, header,
  cookie and path parameter failures.

## Examples

Turn a path template into a regular expression:

```python
from oas_validator.regex_maker import get_regex_for_path

pattern = get_regex_for_path("/orders/{id:[0-9]+}/items/{itemId}")
assert pattern.pattern == "^/orders/([0-9]+)/items/([^/]*)$"
```

Compile a schema with format assertions turned on:

```python
from oas_validator.config import new_validation_options, with_format_assertions
from oas_validator.schema_compiler import new_compiled_schema

options = new_validation_options(with_format_assertions())
validator = new_compiled_schema("test", b'{"type": "string", "format": "date"}', options)
```

Split the parameters of a content type:

```python
from oas_validator.operations import extract_content_type

media_type, charset, boundary = extract_content_type("text/html; charset=UTF-8")
assert (media_type, charset, boundary) == ("text/html", "UTF-8", "")
```

## What it does not do

The package does not read or parse OpenAPI documents, does not match request
paths against a document, and does not validate whole requests or responses by
itself; you build the model objects and call the helpers. The schema compiler
does not fetch remote references, and the `regex_engine` and
`content_assertions` options are stored but not applied when compiling. There
is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```