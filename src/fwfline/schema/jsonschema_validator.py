from __future__ import annotations
import re
from typing import Any, Dict, Mapping, Optional
from jsonschema import Draft202012Validator, FormatChecker, ValidationError

WIDTH_TOKEN = re.compile(r"[+-]?[0-9]+")

PROPERTIES_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "field.lengths": {"type": "string", "format": "width-list"},
        "columns": {"type": "string"},
    },
    "required": ["field.lengths", "columns"],
}


class PropertiesValidator:
    """Validates the flat property bag handed over by the host.

    Only shape is checked here (required keys, string values, integer tokens);
    positivity and column cardinality are enforced by the properties parser.
    """

    def __init__(self, schema: Dict[str, Any] | None = None):
        self.fc = FormatChecker()
        self._register_formats()
        self._validator = Draft202012Validator(schema or PROPERTIES_SCHEMA, format_checker=self.fc)

    def _register_formats(self) -> None:
        @self.fc.checks("width-list", raises=ValueError)
        def _is_width_list(value: str) -> bool:
            tokens = [t.strip() for t in value.split(",")]
            for token in tokens:
                if not WIDTH_TOKEN.fullmatch(token):
                    raise ValueError(f"'{token}' is not an integer")
            return True

    def validate_properties(self, props: Mapping[str, Any]) -> Optional[ValidationError]:
        try:
            self._validator.validate(dict(props))
            return None
        except ValidationError as e:
            return e
