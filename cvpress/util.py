"""
Utilities for external dependencies and general helpers.
File formats, schema checks and packaged resources live here.
"""

import json
from importlib.resources import files
from typing import Mapping, Union

import yaml  # pip install PyYAML

data_files = files('cvpress') / 'data'


def _load_json_file(path: str) -> dict:
    """Load a JSON file from the given path."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_yaml(yaml_path: str):
    """
    Loads a YAML file using PyYAML.
    This works in Python 3.7+ because dicts preserve insertion order.
    """
    with open(yaml_path, 'r', encoding='utf-8') as file:
        # Use safe_load for security reasons.
        return yaml.safe_load(file)


def dump_yaml(d: dict, yaml_path: str):
    """
    Dumps a dictionary to a YAML file using PyYAML,
    preserving key order and using a readable block style.
    """
    with open(yaml_path, 'w', encoding='utf-8') as file:
        yaml.dump(d, file, sort_keys=False, default_flow_style=False)


def load_mapping_file(path: str) -> dict:
    """Load a ``.json`` or ``.yaml``/``.yml`` file into a dict."""
    if path.endswith('.json'):
        return _load_json_file(path)
    elif path.endswith('.yaml') or path.endswith('.yml'):
        return load_yaml(path) or {}
    else:
        raise ValueError(f'Unsupported file type: {path}')


# --------------------------------------------------------------------------------------
# Helpers
from pydantic import ValidationError as PydanticValidationError
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError


def _merge_dicts(base: dict, override: dict) -> dict:
    """Merge two dicts shallowly, with override taking precedence."""
    result = base.copy()
    result.update(override)
    return result


ValidationErrorType = Union[PydanticValidationError, JsonSchemaValidationError]


def extract_friendly_errors(error_obj: ValidationErrorType):
    """
    Extracts a generator of user-friendly error messages from a validation error object.

    Works with both Pydantic's ValidationError and jsonschema's ValidationError
    to provide a consistent output.

    Yields:
        A tuple of (field, message) for each validation error.
    """
    if isinstance(error_obj, PydanticValidationError):
        for error in error_obj.errors():
            field = '.'.join(str(x) for x in error['loc']) or 'root'
            yield field, error['msg']
    elif isinstance(error_obj, JsonSchemaValidationError):
        field_path = list(error_obj.path)
        field = '.'.join(str(x) for x in field_path) if field_path else 'root'
        yield field, error_obj.message


def validation_friendly_errors_string(error_obj: ValidationErrorType) -> str:
    return '\n'.join(
        f"Error in field '{field}': {message}"
        for field, message in extract_friendly_errors(error_obj)
    )


def cv_json_schema() -> dict:
    """JSON schema of the CV document, as generated from the pydantic model."""
    from cvpress.cv_models import CVRecord

    return CVRecord.model_json_schema(mode='validation')


def get_jsonschema_errors(content: Mapping, schema: Mapping | None = None) -> list[str]:
    """Return jsonschema validation error messages for the content (empty if valid)."""
    import jsonschema

    validator = jsonschema.Draft7Validator(schema or cv_json_schema())
    return [
        f"{'.'.join(str(x) for x in e.path) or 'root'}: {e.message}"
        for e in validator.iter_errors(content)
    ]


# --------------------------------------------------------------------------------------
# Packaged resources

cv_jsons_files = data_files / 'cv_jsons'
cv_json_example = cv_jsons_files / 'example_cv.json'
