import logging

from flask import Blueprint

from .const import (
    CONFIG_JINJA_GLOBAL,
    CONFIG_TEMPLATES,
    CONFIG_WIDGETS,
    DEFAULT_JINJA_GLOBAL,
    DEFAULT_TEMPLATES,
    LOGMSG_INF_INIT,
)
from .layout import FormLayout


log = logging.getLogger(__name__)


class FormDesigner(object):
    """
    Flask extension, builds the form layout from the app config and
    exposes it to templates.

    initialize::

        app = Flask(__name__)
        app.config["FORM_DESIGNER_WIDGETS"] = {
            "text": {"attributes": {"placeholder": "label"}}
        }
        form_designer = FormDesigner(app)

    templates::

        {{ form_layout.render(widget) }}
    """

    def __init__(self, app=None, pipeline=None, template_overrides=None):
        """
        :param app: The flask app object
        :param pipeline: Filter pipeline used for attribute rules
        :param template_overrides: Section to template resolution function
        """
        self.app = None
        self.layout = None
        self.pipeline = pipeline
        self.template_overrides = template_overrides
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.config.setdefault(CONFIG_WIDGETS, {})
        app.config.setdefault(CONFIG_TEMPLATES, dict(DEFAULT_TEMPLATES))
        app.config.setdefault(CONFIG_JINJA_GLOBAL, DEFAULT_JINJA_GLOBAL)

        self.layout = FormLayout(
            widget_config=app.config[CONFIG_WIDGETS],
            default_templates=app.config[CONFIG_TEMPLATES],
            template_overrides=self.template_overrides,
            pipeline=self.pipeline,
        )
        app.register_blueprint(
            Blueprint("form_designer", __name__, template_folder="templates")
        )
        app.jinja_env.globals[app.config[CONFIG_JINJA_GLOBAL]] = self.layout
        app.extensions["form_designer"] = self
        self.app = app
        log.info(LOGMSG_INF_INIT, len(self.layout.widget_config))
