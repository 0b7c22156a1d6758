import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from markupsafe import escape, Markup

from .const import LOGMSG_DEB_UNKNOWN_FILTER


log = logging.getLogger(__name__)


def specialchars(value: Any) -> Markup:
    """
    HTML escape a value, encoding ``& < > " '``.

    Not idempotent, an escaped value is escaped again.
    """
    if value is None:
        return Markup("")
    # str() drops the Markup type, so already escaped input is escaped again
    return escape(str(value))


def trim(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def lower(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


DEFAULT_FILTERS = MappingProxyType(
    {
        "specialchars": specialchars,
        "trim": trim,
        "lower": lower,
    }
)


class FilterPipeline(object):
    """
    Applies named, single argument value filters from left to right.

    Unknown filter names are passed through, so configurations written
    for newer filter sets keep working.
    """

    def __init__(self, filters: Optional[Mapping[str, Callable[[Any], Any]]] = None):
        registry: Dict[str, Callable[[Any], Any]] = dict(DEFAULT_FILTERS)
        if filters:
            registry.update(filters)
        self._filters = MappingProxyType(registry)

    @property
    def filters(self) -> Mapping[str, Callable[[Any], Any]]:
        return self._filters

    def extend(self, filters: Mapping[str, Callable[[Any], Any]]) -> "FilterPipeline":
        """Return a new pipeline with additional filters"""
        registry = dict(self._filters)
        registry.update(filters)
        return FilterPipeline(registry)

    def apply(self, value: Any, names: Iterable[str]) -> Any:
        for name in names:
            func = self._filters.get(name)
            if func is None:
                log.debug(LOGMSG_DEB_UNKNOWN_FILTER, name)
                continue
            value = func(value)
        return value

    __call__ = apply

    def __contains__(self, name):
        return name in self._filters


default_pipeline = FilterPipeline()
