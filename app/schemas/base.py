from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Frontend sends camelCase; snake_case field names are accepted too."""
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_columns(self) -> dict:
        """Fields the client actually sent, nested models dumped in wire (camelCase) form."""
        out = {}
        for name in self.model_fields_set:
            out[name] = _dump(getattr(self, name))
        return out


def _dump(value):
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value
