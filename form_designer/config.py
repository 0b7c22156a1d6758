"""
Widget configuration.

The configuration is a nested mapping keyed by widget type::

    {
        "text": {
            "attributes": {
                "placeholder": "label",
                "title": {"key": "help_text", "filters": ["specialchars"]},
                "autocomplete": {"value": "off"},
            },
            "templates": {"help": None},
        }
    }

An attribute rule is either the name of a widget field, whose value is
used verbatim, or a mapping with an optional literal ``value``, the
``key`` of a widget field used when ``value`` is empty, and a list of
``filters`` applied to the result.

``templates`` overrides the template used for a section, ``None`` or an
empty name suppresses the section.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional, Tuple

from marshmallow import (
    fields,
    post_load,
    Schema,
    validate,
    ValidationError,
    validates_schema,
)

from .attributes import is_empty
from .const import LOGMSG_ERR_INVALID_CONFIG, SECTIONS
from .exceptions import InvalidWidgetConfigError


log = logging.getLogger(__name__)


def _empty_mapping():
    return MappingProxyType({})


@dataclass(frozen=True)
class AttributeRule:
    key: Optional[str] = None
    value: Any = None
    filters: Tuple[str, ...] = ()
    direct: bool = False

    @classmethod
    def field(cls, key: str) -> "AttributeRule":
        """Rule reading a widget field verbatim, without filters"""
        return cls(key=key, direct=True)

    @property
    def has_value(self) -> bool:
        return not is_empty(self.value)


@dataclass(frozen=True)
class WidgetTypeConfig:
    attributes: Mapping = field(default_factory=_empty_mapping)
    templates: Mapping = field(default_factory=_empty_mapping)


class AttributeRuleSchema(Schema):
    value = fields.Raw(allow_none=True)
    key = fields.String(allow_none=True)
    filters = fields.List(fields.String(), load_default=list)

    @validates_schema
    def validate_source(self, data, **kwargs):
        if is_empty(data.get("value")) and not data.get("key"):
            raise ValidationError("Either a non empty 'value' or a 'key' is required.")

    @post_load
    def make_rule(self, data, **kwargs):
        return AttributeRule(
            key=data.get("key"),
            value=data.get("value"),
            filters=tuple(data["filters"]),
        )


class AttributeRuleField(fields.Field):
    """A widget field name or a structured attribute rule"""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, AttributeRule):
            return value
        if isinstance(value, str):
            if not value:
                raise ValidationError("Field name must not be empty.")
            return AttributeRule.field(value)
        if isinstance(value, Mapping):
            return AttributeRuleSchema().load(value)
        raise ValidationError("Expected a field name or a rule mapping.")


class WidgetTypeSchema(Schema):
    attributes = fields.Dict(
        keys=fields.String(), values=AttributeRuleField(), load_default=dict
    )
    templates = fields.Dict(
        keys=fields.String(validate=validate.OneOf(SECTIONS)),
        values=fields.String(allow_none=True),
        load_default=dict,
    )

    @post_load
    def make_config(self, data, **kwargs):
        return WidgetTypeConfig(
            attributes=MappingProxyType(dict(data["attributes"])),
            templates=MappingProxyType(dict(data["templates"])),
        )


class WidgetConfigSchema(Schema):
    widgets = fields.Dict(keys=fields.String(), values=fields.Nested(WidgetTypeSchema))


class WidgetConfig(Mapping):
    """Immutable mapping of widget type to ``WidgetTypeConfig``"""

    def __init__(self, types=None):
        self._types = MappingProxyType(dict(types or {}))

    @classmethod
    def load(cls, raw) -> "WidgetConfig":
        if isinstance(raw, WidgetConfig):
            return raw
        try:
            data = WidgetConfigSchema().load({"widgets": dict(raw or {})})
        except ValidationError as e:
            messages = e.messages.get("widgets", e.messages)
            log.error(LOGMSG_ERR_INVALID_CONFIG, messages)
            raise InvalidWidgetConfigError(messages) from e
        return cls(data["widgets"])

    def attribute_rules(self, widget_type: str) -> Mapping:
        type_config = self._types.get(widget_type)
        if type_config is None:
            return _empty_mapping()
        return type_config.attributes

    def templates(self, widget_type: str) -> Mapping:
        type_config = self._types.get(widget_type)
        if type_config is None:
            return _empty_mapping()
        return type_config.templates

    def __getitem__(self, widget_type):
        return self._types[widget_type]

    def __iter__(self):
        return iter(self._types)

    def __len__(self):
        return len(self._types)


def load_widget_config(raw) -> WidgetConfig:
    return WidgetConfig.load(raw)
