import json
from collections.abc import Mapping

from .exceptions import ValidationError


def _blank(value):
    return not isinstance(value, str) or not value.strip()


def require_mapping(data):
    if not isinstance(data, Mapping):
        raise ValidationError("License data must be a mapping.", field="data")


def encode_license_data(data):
    """Serialize a payload into the JSON request body.

    Only plain JSON values go through: dicts, lists, strings, finite numbers,
    booleans and None.
    """
    try:
        return json.dumps(data, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ValidationError(f"License data is not JSON serializable: {e}", field="data") from e


def validate_license_data(data, is_create=False):
    """Check the fields the panel requires when a license is created.

    Edits are partial updates, so nothing is required unless is_create.
    """
    require_mapping(data)
    if not is_create:
        return

    course = data.get("course")
    if not isinstance(course, (list, tuple)) or not course:
        raise ValidationError('Field "course" is required and must be a non-empty list.', field="course")

    if _blank(data.get("name")):
        raise ValidationError('Field "name" is required and must be a non-empty string.', field="name")

    watermark = data.get("watermark")
    texts = watermark.get("texts") if isinstance(watermark, Mapping) else None
    if not isinstance(texts, (list, tuple)) or not texts:
        raise ValidationError(
            'Field "watermark.texts" is required and must be a non-empty list.', field="watermark.texts"
        )

    for i, item in enumerate(texts):
        if not isinstance(item, Mapping) or _blank(item.get("text")):
            path = f"watermark.texts[{i}].text"
            raise ValidationError(f'Field "{path}" is required and must be a non-empty string.', field=path)


def validate_license_id(license_id):
    if _blank(license_id):
        raise ValidationError("License ID is required and must be a non-empty string.", field="license_id")
