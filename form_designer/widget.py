from dataclasses import dataclass, field as dc_field
from typing import Any, Dict, List, Optional

from wtforms import widgets as wtf_widgets


_PROPERTIES = (
    "id",
    "name",
    "type",
    "css_class",
    "control_css_class",
    "label",
    "value",
    "help_text",
    "errors",
)

_MISSING = object()


@dataclass(frozen=True)
class Widget:
    """
    Read only view of a single form control.

    ``attributes`` holds the HTML attributes contributed by the widget
    itself, ``fields`` any other named value an attribute rule or a
    template may want to read (placeholder, maxlength, options, ...).
    """

    id: str
    name: str
    type: str
    css_class: str = ""
    control_css_class: str = ""
    label: str = ""
    value: Any = None
    help_text: str = ""
    errors: List[str] = dc_field(default_factory=list)
    attributes: Dict[str, Any] = dc_field(default_factory=dict)
    fields: Dict[str, Any] = dc_field(default_factory=dict)

    def get_field(self, key: str) -> Any:
        """
        Read a named field, raises ``KeyError`` if the widget has no such field
        """
        if key in _PROPERTIES:
            return getattr(self, key)
        value = self.fields.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def has_field(self, key: str) -> bool:
        return key in _PROPERTIES or key in self.fields

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self.get_field(key)
        except KeyError:
            return default

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_field(
        cls,
        field,
        widget_id: Optional[str] = None,
        widget_type: Optional[str] = None,
        base_widget=None,
        css_class: str = "",
        control_css_class: str = "",
        **attributes
    ) -> "Widget":
        """
        Adapt a bound WTForms field.

        ``render_kw`` of the field and keyword arguments given at render
        time end up in the widget's attribute map, later ones win.
        """
        base_widget = base_widget or field.widget
        widget_type = widget_type or field_widget_type(field, base_widget)
        widget_attributes = dict(field.render_kw or {})
        if getattr(field.flags, "required", False):
            widget_attributes["required"] = True
        if getattr(base_widget, "multiple", False):
            widget_attributes["multiple"] = True
        widget_attributes.update(attributes)
        # the control id and the label target are both derived from the widget id
        render_id = widget_attributes.pop("id", None)
        widget_id = widget_id or render_id

        fields = {"description": field.description}
        if hasattr(field, "iter_choices"):
            fields["options"] = [tuple(choice)[:3] for choice in field.iter_choices()]
        if widget_type in ("checkbox", "radio"):
            fields["checked"] = bool(field.data)

        label = field.label.text if field.label else ""
        value = field._value() if hasattr(field, "_value") else field.data
        return cls(
            id=widget_id or field.id,
            name=field.name,
            type=widget_type,
            css_class=css_class,
            control_css_class=control_css_class,
            label=label,
            value=value,
            help_text=field.description or "",
            errors=list(field.errors or []),
            attributes=widget_attributes,
            fields=fields,
        )


def field_widget_type(field, widget=None) -> str:
    """Derive the widget type name of a WTForms field"""
    widget = widget or field.widget
    input_type = getattr(widget, "input_type", None)
    if input_type:
        return input_type
    if isinstance(widget, wtf_widgets.TextArea):
        return "textarea"
    if isinstance(widget, wtf_widgets.Select):
        return "select"
    name = field.type
    if name.endswith("Field"):
        name = name[: -len("Field")]
    return name.lower()
