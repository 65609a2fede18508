"""schemacheck validator - payload validation and example generation.

This module compiles a resolved JSON Schema into a validator that reports
every violation in one pass, and synthesizes example payloads from the same
schema:
- Field-level errors with dot and JSON-pointer paths
- Fix suggestions for every constraint kind
- Advisory warnings for useful optional fields and deprecated fields
- Example payloads honoring formats, patterns, enums and bounds

## Key Components

### Core Classes
- `PayloadValidator`: Compiled validator for one schema
- `SchemaCompiler`: Turns a SchemaNode tree into check closures
- `ErrorFormatter`: Fix suggestions and text rendering
- `ExampleGenerator`: Example payload synthesis

### Models
- `ValidationResultModel`: Outcome of one validation
- `ValidationErrorModel` / `ValidationWarningModel`: Individual findings
- `ExampleOptionsModel`: Example generation options

## Quick Examples

### Validation
```python
from schemacheck.validator import validate

schema = {
    "type": "object",
    "required": ["email"],
    "properties": {
        "email": {"type": "string", "format": "email"},
        "ssn": {"type": "string", "pattern": "^\\\\d{3}-\\\\d{2}-\\\\d{4}$"},
    },
}

result = validate({"ssn": "123456789"}, schema)
# result.valid == False
# result.errors[0].field == "ssn"  (pattern)
# result.errors[1].field == "email"  (required)
```

### Example Generation
```python
from schemacheck.validator import ExampleOptionsModel, generate_example

generate_example(schema, ExampleOptionsModel(required_only=True))
# Returns: {"email": "user@example.com"}
```
"""

from .compiler import Collector, SchemaCompiler, SchemaError
from .core import PayloadValidator, validate
from .examples import ExampleGenerator, generate_example
from .formatter import NO_RULES_MESSAGE, ErrorFormatter
from .models import (
    ErrorKind,
    ExampleOptionsModel,
    ValidationErrorModel,
    ValidationResultModel,
    ValidationWarningModel,
    WarningKind,
)

__all__ = [
    # Validation
    "validate",
    "PayloadValidator",
    "SchemaCompiler",
    "SchemaError",
    "Collector",
    # Examples
    "generate_example",
    "ExampleGenerator",
    # Formatting
    "ErrorFormatter",
    "NO_RULES_MESSAGE",
    # Models
    "ErrorKind",
    "WarningKind",
    "ValidationErrorModel",
    "ValidationWarningModel",
    "ValidationResultModel",
    "ExampleOptionsModel",
]
