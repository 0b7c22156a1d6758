"""
Integration tests for the Flask extension, the shipped templates and the
WTForms layout widget.
"""

from flask import render_template_string
from wtforms import Form, SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired

from form_designer import FormLayout, FormLayoutWidget, Widget
from form_designer.const import DEFAULT_TEMPLATES


class SignupForm(Form):
    email = StringField(
        "E-Mail",
        validators=[DataRequired()],
        description="We never share it",
        widget=FormLayoutWidget(css_class="big"),
    )
    comment = TextAreaField(
        "Comment",
        render_kw={"rows": 3, "placeholder": ""},
        widget=FormLayoutWidget(control_widget=TextAreaField.widget),
    )
    country = SelectField(
        "Country",
        choices=[("de", "Germany"), ("fr", "France")],
        default="fr",
        widget=FormLayoutWidget(control_widget=SelectField.widget),
    )


class TestFormDesignerExtension:
    def test_init_app(self, app, form_designer):
        assert app.extensions["form_designer"] is form_designer
        assert isinstance(form_designer.layout, FormLayout)
        assert app.config["FORM_DESIGNER_TEMPLATES"] == DEFAULT_TEMPLATES
        assert app.config["FORM_DESIGNER_JINJA_GLOBAL"] == "form_layout"
        assert app.jinja_env.globals["form_layout"] is form_designer.layout

    def test_widget_config_from_app_config(self, form_designer):
        rules = form_designer.layout.widget_config.attribute_rules("text")

        assert list(rules) == ["placeholder"]

    def test_render_with_shipped_templates(self, app, form_designer):
        widget = Widget(
            id="1",
            name="name",
            type="text",
            label="Name",
            value='"Tom"',
            help_text="Your name",
            errors=["Too short"],
        )
        with app.app_context():
            html = form_designer.layout.render(widget)

        assert '<div class="widget widget-text">' in html
        assert '<label for="ctrl_1">Name</label>' in html
        assert (
            '<input type="text" id="ctrl_1" name="name" placeholder="Name"'
            ' value="&#34;Tom&#34;">'
        ) in html
        assert '<p class="error">Too short</p>' in html
        assert '<p class="help-text">Your name</p>' in html

    def test_help_suppressed_for_textarea(self, app, form_designer):
        widget = Widget(id="2", name="comment", type="textarea", help_text="Help")
        with app.app_context():
            html = form_designer.layout.render(widget)

        assert '<textarea id="ctrl_2" name="comment"></textarea>' in html
        assert "Help" not in html

    def test_layout_in_templates(self, app, form_designer):
        widget = Widget(id="3", name="city", type="text", label="City")
        with app.app_context():
            html = render_template_string(
                "{{ form_layout.render_control(widget) }}", widget=widget
            )

        assert html == (
            '<input type="text" id="ctrl_3" name="city" placeholder="City" value="">'
        )


class TestFormLayoutWidget:
    def test_string_field(self, app, form_designer):
        form = SignupForm()
        with app.app_context():
            html = form.email()

        assert '<div class="widget widget-text big">' in html
        assert '<label for="ctrl_email" class="big">E-Mail</label>' in html
        assert (
            'id="ctrl_email" name="email" placeholder="E-Mail" required class="big"'
        ) in html
        assert '<p class="help-text">We never share it</p>' in html

    def test_render_time_class(self, app, form_designer):
        form = SignupForm()
        with app.app_context():
            html = form.email(class_="wide")

        assert '<div class="widget widget-text wide">' in html

    def test_textarea_field(self, app, form_designer):
        form = SignupForm()
        with app.app_context():
            html = form.comment()

        assert '<div class="widget widget-textarea">' in html
        assert '<textarea id="ctrl_comment" name="comment" rows="3"></textarea>' in html

    def test_select_field(self, app, form_designer):
        form = SignupForm()
        with app.app_context():
            html = form.country()

        assert '<select id="ctrl_country" name="country">' in html
        assert '<option value="de">Germany</option>' in html
        assert '<option value="fr" selected>France</option>' in html

    def test_explicit_layout_and_section(self, make_layout):
        form = SignupForm()
        form.email.widget = FormLayoutWidget(layout=make_layout(), section="control")

        assert form.email() == '<input id="ctrl_email" name="email" required>'

    def test_render_time_id_keeps_label_and_control_in_sync(self, make_layout):
        form = SignupForm()
        form.email.widget = FormLayoutWidget(layout=make_layout())

        html = form.email(id="x")

        assert '<label for="ctrl_x">E-Mail</label>' in html
        assert '<input id="ctrl_x" name="email" required>' in html

    def test_render_kw_id_is_the_widget_id(self):
        form = SignupForm()
        form.email.render_kw = {"id": "mail"}

        widget = Widget.from_field(form.email)

        assert widget.id == "mail"
        assert "id" not in widget.attributes
