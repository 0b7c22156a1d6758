import re
from typing import Any, Dict, Iterator, List, Optional, Tuple

from markupsafe import escape, Markup

from .const import BOOLEAN_ATTRIBUTES
from .exceptions import InvalidAttributeError


_VALID_NAME = re.compile(r"^[^\s\"'>/=\x00-\x1f\x7f]+$")


def is_empty(value: Any) -> bool:
    """Absent and empty string values are never rendered"""
    return value is None or value == ""


def _render_pair(name: str, value: Any) -> Markup:
    if value is True:
        return escape(name)
    return Markup('{0}="{1}"').format(name, value)


class AttributeCollection(object):
    """
    Ordered set of HTML attributes with a separate, ordered set of
    CSS classes.

    Attribute names are unique, the last write wins. Names listed in
    ``BOOLEAN_ATTRIBUTES`` only ever store ``True``. Empty values are
    not inserted. A ``class`` attribute is merged into the class set.

    Rendering keeps insertion order and puts ``class`` last::

        >>> attrs = AttributeCollection({"id": "ctrl_5", "required": "1"})
        >>> str(attrs.add_class("big"))
        'id="ctrl_5" required class="big"'
    """

    def __init__(self, attributes=None, classes=None):
        self._attributes: Dict[str, Any] = {}
        self._classes: List[str] = []
        for name, value in (attributes or {}).items():
            self.set_attribute(name, value)
        for css_class in classes or ():
            self.add_class(css_class)

    def set_attribute(self, name: str, value: Any) -> "AttributeCollection":
        self._validate_name(name)
        if name == "class":
            if not is_empty(value):
                self.add_class(value)
            return self
        if name in BOOLEAN_ATTRIBUTES:
            if value is False or value is None:
                self._attributes.pop(name, None)
            else:
                self._attributes[name] = True
            return self
        if value is False:
            self._attributes.pop(name, None)
            return self
        if is_empty(value):
            return self
        self._attributes[name] = value
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        if name == "class":
            return " ".join(self._classes) if self._classes else default
        return self._attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        if name == "class":
            return bool(self._classes)
        return name in self._attributes

    def remove_attribute(self, name: str) -> "AttributeCollection":
        if name == "class":
            self._classes = []
        else:
            self._attributes.pop(name, None)
        return self

    def set_id(self, value: str) -> "AttributeCollection":
        return self.set_attribute("id", value)

    def get_id(self) -> Optional[str]:
        return self._attributes.get("id")

    def add_class(self, css_class: str) -> "AttributeCollection":
        """Add one or more whitespace separated classes, skipping duplicates"""
        for name in str(css_class).split():
            if name not in self._classes:
                self._classes.append(name)
        return self

    def remove_class(self, css_class: str) -> "AttributeCollection":
        for name in str(css_class).split():
            if name in self._classes:
                self._classes.remove(name)
        return self

    def has_class(self, css_class: str) -> bool:
        return css_class in self._classes

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    def items(self) -> List[Tuple[str, Any]]:
        items = list(self._attributes.items())
        if self._classes:
            items.append(("class", " ".join(self._classes)))
        return items

    def to_html(self) -> Markup:
        """
        Render as ``name="value"`` pairs, ``True`` as the bare name.

        Names are rendered as stored, values are escaped once, ``Markup``
        values are kept as they are.
        """
        return Markup(" ").join(
            _render_pair(name, value) for name, value in self.items()
        )

    def __html__(self):
        return self.to_html()

    def __str__(self):
        return str(self.to_html())

    def __repr__(self):
        return "<AttributeCollection {0}>".format(self.to_html())

    def __iter__(self) -> Iterator[str]:
        return iter(name for name, _ in self.items())

    def __len__(self):
        return len(self._attributes) + (1 if self._classes else 0)

    def __contains__(self, name):
        return self.has_attribute(name)

    def __eq__(self, other):
        if not isinstance(other, AttributeCollection):
            return NotImplemented
        return self.items() == other.items()

    @staticmethod
    def _validate_name(name):
        if not isinstance(name, str) or not _VALID_NAME.match(name):
            raise InvalidAttributeError(name)
