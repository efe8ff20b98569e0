"""
Schema validation for repohygiene config data.

Schemas live in repohygiene/schemas/<name>.schema.json. Every violation is
reported, not just the first, so a config file can be fixed in one pass.
"""

import json
from pathlib import Path

import jsonschema.validators


class ValidationError(Exception):
    """Schema validation failed."""

    def __init__(self, schema_name: str, problems: list[str]):
        self.schema_name = schema_name
        self.problems = problems
        super().__init__(f"[{schema_name}] " + "; ".join(problems))


_validator_cache: dict = {}


def _schema_path(schema_name: str) -> Path:
    return Path(__file__).parent.parent / "schemas" / f"{schema_name}.schema.json"


def get_validator(schema_name: str):
    """Load the named schema and build a validator for it, with caching."""
    if schema_name not in _validator_cache:
        path = _schema_path(schema_name)
        if not path.exists():
            raise ValidationError(schema_name, [f"schema file not found: {path}"])
        schema = json.loads(path.read_text())
        validator_cls = jsonschema.validators.validator_for(schema)
        validator_cls.check_schema(schema)
        _validator_cache[schema_name] = validator_cls(schema)
    return _validator_cache[schema_name]


def validate(data: dict, schema_name: str) -> None:
    """
    Validate data against named schema.

    Args:
        data: Dictionary to validate
        schema_name: Schema name (e.g., "config")

    Raises:
        ValidationError: listing every violation as "<path>: <message>"
    """
    validator = get_validator(schema_name)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return

    problems = []
    for e in errors:
        where = ".".join(str(p) for p in e.absolute_path) or "(root)"
        problems.append(f"{where}: {e.message}")
    raise ValidationError(schema_name, problems)
