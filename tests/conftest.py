import pytest
from flask import Flask
from jinja2 import DictLoader, Environment

from form_designer import FormDesigner, FormLayout, Widget


TEMPLATES = {
    "layout.html": (
        "<div {{ layout.container_attributes(widget) }}>"
        "{{ layout.render_label(widget) }}"
        "{{ layout.render_control(widget) }}"
        "{{ layout.render_errors(widget) }}"
        "{{ layout.render_help_text(widget) }}"
        "</div>"
    ),
    "label.html": "<label {{ layout.label_attributes(widget) }}>{{ widget.label }}</label>",
    "control.html": "<input {{ layout.control_attributes(widget) }}>",
    "error.html": "{% for error in widget.errors %}<p>{{ error }}</p>{% endfor %}",
    "help.html": "<p>{{ widget.help_text }}</p>",
    "textarea.html": "<textarea {{ layout.control_attributes(widget) }}></textarea>",
}

SECTION_TEMPLATES = {
    "layout": "layout.html",
    "control": "control.html",
    "label": "label.html",
    "error": "error.html",
    "help": "help.html",
}


@pytest.fixture
def jinja_env():
    return Environment(loader=DictLoader(TEMPLATES), autoescape=True)


@pytest.fixture
def make_layout(jinja_env):
    def factory(widget_config=None, **kwargs):
        kwargs.setdefault("default_templates", SECTION_TEMPLATES)
        return FormLayout(widget_config, jinja_env=jinja_env, **kwargs)

    return factory


@pytest.fixture
def text_widget():
    return Widget(
        id="5",
        name="email",
        type="text",
        css_class="big",
        label="E-Mail",
        attributes={"required": "1", "placeholder": ""},
    )


@pytest.fixture
def app():
    app = Flask(__name__)
    app.config["SECRET_KEY"] = "test-secret-key"
    app.config["FORM_DESIGNER_WIDGETS"] = {
        "text": {"attributes": {"placeholder": "label"}},
        "textarea": {"templates": {"help": None}},
    }
    return app


@pytest.fixture
def form_designer(app):
    return FormDesigner(app)
