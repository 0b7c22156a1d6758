"""
Form layout: renders the sections of a widget through Jinja2 templates.
"""
import logging
from typing import Callable, Dict, Mapping, Optional

from flask import current_app
from markupsafe import Markup

from .attributes import AttributeCollection
from .const import (
    DEFAULT_TEMPLATES,
    LOGMSG_DEB_RENDER_SECTION,
    LOGMSG_DEB_SKIP_SECTION,
    SECTION_CONTROL,
    SECTION_ERROR,
    SECTION_HELP,
    SECTION_LABEL,
    SECTION_LAYOUT,
    SECTIONS,
)
from .resolver import AttributeResolver
from .widget import Widget


log = logging.getLogger(__name__)

TemplateFunction = Callable[[Widget, str], Optional[str]]


class TemplateResolver(object):
    """
    Maps a section to the function resolving its template name.

    Every section falls back to ``get_template``: the template configured
    for the widget type, else the default template of the section.
    ``overrides`` replaces the resolution function of single sections.
    """

    def __init__(
        self,
        widget_config,
        default_templates: Optional[Mapping[str, Optional[str]]] = None,
        overrides: Optional[Mapping[str, TemplateFunction]] = None,
    ):
        self.widget_config = widget_config
        self.default_templates = dict(DEFAULT_TEMPLATES)
        if default_templates is not None:
            self.default_templates.update(default_templates)
        self.functions: Dict[str, TemplateFunction] = {
            section: self.get_template for section in SECTIONS
        }
        if overrides:
            for section, func in overrides.items():
                if section not in self.functions:
                    raise ValueError("Unknown section {0!r}".format(section))
                self.functions[section] = func

    def get_template(self, widget: Widget, section: str) -> Optional[str]:
        templates = self.widget_config.templates(widget.type)
        if section in templates:
            return templates[section]
        return self.default_templates.get(section)

    def __call__(self, widget: Widget, section: str) -> Optional[str]:
        return self.functions[section](widget, section)


class FormLayout(object):
    """
    Renders form widgets section by section.

    Templates get the ``widget`` and the ``layout`` itself, so they can
    call back into ``container_attributes``, ``render_control`` and
    the other accessors::

        <div {{ layout.container_attributes(widget) }}>
          {{ layout.render_label(widget) }}
          {{ layout.render_control(widget) }}
        </div>
    """

    def __init__(
        self,
        widget_config=None,
        default_templates=None,
        template_overrides=None,
        pipeline=None,
        jinja_env=None,
    ):
        self.resolver = AttributeResolver(widget_config, pipeline=pipeline)
        self.templates = TemplateResolver(
            self.resolver.widget_config,
            default_templates=default_templates,
            overrides=template_overrides,
        )
        self._jinja_env = jinja_env

    @property
    def jinja_env(self):
        if self._jinja_env is not None:
            return self._jinja_env
        return current_app.jinja_env

    @property
    def widget_config(self):
        return self.resolver.widget_config

    def render(self, widget: Widget) -> Markup:
        return self.render_section(widget, SECTION_LAYOUT)

    def render_control(self, widget: Widget) -> Markup:
        return self.render_section(widget, SECTION_CONTROL)

    def render_label(self, widget: Widget) -> Markup:
        return self.render_section(widget, SECTION_LABEL)

    def render_errors(self, widget: Widget) -> Markup:
        return self.render_section(widget, SECTION_ERROR)

    def render_help_text(self, widget: Widget) -> Markup:
        return self.render_section(widget, SECTION_HELP)

    def render_section(self, widget: Widget, section: str) -> Markup:
        """
        Render one section, an empty template name renders nothing.

        :raises jinja2.TemplateNotFound: the template does not exist
        """
        template_name = self.templates(widget, section)
        if not template_name:
            log.debug(LOGMSG_DEB_SKIP_SECTION, section, widget.name)
            return Markup("")
        log.debug(LOGMSG_DEB_RENDER_SECTION, section, widget.name, template_name)
        template = self.jinja_env.get_template(template_name)
        return Markup(template.render(widget=widget, layout=self))

    def container_attributes(self, widget: Widget) -> AttributeCollection:
        return self.resolver.container_attributes(widget)

    def label_attributes(self, widget: Widget) -> AttributeCollection:
        return self.resolver.label_attributes(widget)

    def control_attributes(self, widget: Widget) -> AttributeCollection:
        return self.resolver.control_attributes(widget)
