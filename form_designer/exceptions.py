class FormDesignerException(Exception):
    """Base form designer exception"""

    pass


class AttributeResolutionError(FormDesignerException):
    """
    A configured attribute rule references a field the widget does not have.
    """

    def __init__(self, widget_type, field, attribute=None):
        self.widget_type = widget_type
        self.field = field
        self.attribute = attribute
        message = "Widget of type '{0}' has no field '{1}'".format(widget_type, field)
        if attribute:
            message += " (required by attribute '{0}')".format(attribute)
        super(AttributeResolutionError, self).__init__(message)


class InvalidAttributeError(FormDesignerException, ValueError):
    """Raised for attribute names that can not be rendered as HTML"""

    def __init__(self, name):
        self.name = name
        super(InvalidAttributeError, self).__init__(
            "Invalid attribute name {0!r}".format(name)
        )


class InvalidWidgetConfigError(FormDesignerException):
    """Raised when the widget configuration does not validate"""

    def __init__(self, messages):
        self.messages = messages
        super(InvalidWidgetConfigError, self).__init__(
            "Invalid widget config: {0}".format(messages)
        )
