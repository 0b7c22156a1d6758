import logging
from typing import Optional

from .attributes import AttributeCollection, is_empty
from .config import AttributeRule, WidgetConfig
from .const import BOOLEAN_ATTRIBUTES, CONTROL_ID_PREFIX, LOGMSG_ERR_MISSING_FIELD
from .exceptions import AttributeResolutionError
from .filters import default_pipeline, FilterPipeline
from .widget import Widget


log = logging.getLogger(__name__)


class AttributeResolver(object):
    """
    Builds the attribute collections of a widget's container, label and
    control from the widget itself and the widget configuration.

    Instances hold no per call state and can be shared.
    """

    def __init__(self, widget_config=None, pipeline: Optional[FilterPipeline] = None):
        """
        :param widget_config: ``WidgetConfig`` or a raw config mapping
        :param pipeline: Filter pipeline for structured attribute rules
        """
        self.widget_config = WidgetConfig.load(widget_config)
        self.pipeline = pipeline or default_pipeline

    def container_attributes(self, widget: Widget) -> AttributeCollection:
        attributes = AttributeCollection()
        attributes.add_class("widget").add_class("widget-" + widget.type)
        if widget.css_class:
            attributes.add_class(widget.css_class)
        return attributes

    def label_attributes(self, widget: Widget) -> AttributeCollection:
        attributes = AttributeCollection()
        attributes.set_attribute("for", CONTROL_ID_PREFIX + str(widget.id))
        if widget.css_class:
            attributes.add_class(widget.css_class)
        return attributes

    def control_attributes(self, widget: Widget) -> AttributeCollection:
        """
        Control attributes, applied in order: id and name, configured
        attributes of the widget type, the widget's own attributes,
        the widget's css classes.
        """
        attributes = AttributeCollection()
        attributes.set_id(CONTROL_ID_PREFIX + str(widget.id))
        attributes.set_attribute("name", widget.name)
        self._add_configured_attributes(widget, attributes)
        self._add_widget_attributes(widget, attributes)
        if widget.css_class:
            attributes.add_class(widget.css_class)
        if widget.control_css_class:
            attributes.add_class(widget.control_css_class)
        return attributes

    def resolve_rule(self, widget: Widget, attribute: str, rule: AttributeRule):
        """Value of a single configured attribute"""
        if rule.direct:
            return self._read_field(widget, rule.key, attribute)
        if rule.has_value:
            value = rule.value
        else:
            value = self._read_field(widget, rule.key, attribute)
        if not rule.filters:
            return value
        return self.pipeline.apply(value, rule.filters)

    def _add_configured_attributes(self, widget, attributes):
        rules = self.widget_config.attribute_rules(widget.type)
        for attribute, rule in rules.items():
            attributes.set_attribute(attribute, self.resolve_rule(widget, attribute, rule))

    def _add_widget_attributes(self, widget, attributes):
        for name, value in widget.attributes.items():
            if name in BOOLEAN_ATTRIBUTES:
                attributes.set_attribute(name, True)
            elif not is_empty(value):
                attributes.set_attribute(name, value)

    def _read_field(self, widget, key, attribute):
        try:
            return widget.get_field(key)
        except KeyError:
            log.error(LOGMSG_ERR_MISSING_FIELD, widget.type, key, attribute)
            raise AttributeResolutionError(widget.type, key, attribute)
