from flask import current_app
from wtforms import widgets

from .const import SECTION_LAYOUT
from .widget import Widget


class FormLayoutWidget(object):
    """
    WTForms widget rendering a field through a form layout.

    ``control_widget`` is the widget the field would use otherwise, it
    determines the widget type. Without an explicit ``layout`` the one
    of the current app's form designer extension is used::

        name = StringField("Name", widget=FormLayoutWidget(css_class="big"))
    """

    def __init__(
        self,
        layout=None,
        control_widget=None,
        section=SECTION_LAYOUT,
        widget_type=None,
        css_class="",
        control_css_class="",
    ):
        self.layout = layout
        self.control_widget = control_widget or widgets.TextInput()
        self.section = section
        self.widget_type = widget_type
        self.css_class = css_class
        self.control_css_class = control_css_class

    def get_layout(self):
        if self.layout is not None:
            return self.layout
        return current_app.extensions["form_designer"].layout

    def __call__(self, field, **kwargs):
        widget_id = kwargs.pop("id", None)
        css_class = kwargs.pop("class_", None) or kwargs.pop("class", None)
        widget = Widget.from_field(
            field,
            widget_id=widget_id,
            widget_type=self.widget_type,
            base_widget=self.control_widget,
            css_class=css_class or self.css_class,
            control_css_class=self.control_css_class,
            **kwargs
        )
        return self.get_layout().render_section(widget, self.section)
