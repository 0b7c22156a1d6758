# Renderable sections of a widget
SECTION_LAYOUT = "layout"
SECTION_CONTROL = "control"
SECTION_LABEL = "label"
SECTION_ERROR = "error"
SECTION_HELP = "help"

SECTIONS = (
    SECTION_LAYOUT,
    SECTION_CONTROL,
    SECTION_LABEL,
    SECTION_ERROR,
    SECTION_HELP,
)

# HTML attributes rendered by presence only
BOOLEAN_ATTRIBUTES = frozenset(
    [
        "compact",
        "declare",
        "defer",
        "disabled",
        "formnovalidate",
        "ismap",
        "itemscope",
        "multiple",
        "nowrap",
        "novalidate",
        "readonly",
        "required",
        "selected",
    ]
)

# Prefix of the generated control id
CONTROL_ID_PREFIX = "ctrl_"

DEFAULT_TEMPLATES = {
    SECTION_LAYOUT: "form_designer/layout.html",
    SECTION_CONTROL: "form_designer/control.html",
    SECTION_LABEL: "form_designer/label.html",
    SECTION_ERROR: "form_designer/error.html",
    SECTION_HELP: "form_designer/help.html",
}

# Flask config keys
CONFIG_WIDGETS = "FORM_DESIGNER_WIDGETS"
CONFIG_TEMPLATES = "FORM_DESIGNER_TEMPLATES"
CONFIG_JINJA_GLOBAL = "FORM_DESIGNER_JINJA_GLOBAL"

DEFAULT_JINJA_GLOBAL = "form_layout"

LOGMSG_ERR_MISSING_FIELD = (
    "Widget of type %s has no field %s, required by attribute %s"
)
LOGMSG_ERR_INVALID_CONFIG = "Invalid widget config: %s"
LOGMSG_DEB_UNKNOWN_FILTER = "Unknown attribute filter %s, value passed through"
LOGMSG_DEB_RENDER_SECTION = "Rendering section %s of widget %s with template %s"
LOGMSG_DEB_SKIP_SECTION = "No template for section %s of widget %s, skipping"
LOGMSG_INF_INIT = "Form designer initialized with %d widget types"
