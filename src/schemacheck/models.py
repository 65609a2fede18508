"""Base Pydantic model for schemacheck.

All result and settings models inherit from :class:`EngineBaseModel` so they
share one configuration:

- Strict field validation (no extra fields allowed)
- Immutable instances, safe to hand to concurrent callers
- camelCase aliases on output, snake_case or camelCase accepted on input

Example:
    >>> from schemacheck.models import EngineBaseModel
    >>>
    >>> class MyModel(EngineBaseModel):
    ...     fix_suggestion: str | None = None
    >>>
    >>> MyModel(fix_suggestion="x").model_dump(by_alias=True)
    {'fixSuggestion': 'x'}
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EngineBaseModel(BaseModel):
    """Base model for all schemacheck Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    - alias_generator=to_camel: Serialises with the camelCase names used by
      JSON consumers
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
