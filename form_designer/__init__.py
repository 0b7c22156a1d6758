__version__ = "1.0.0"

from .attributes import AttributeCollection  # noqa: F401
from .base import FormDesigner  # noqa: F401
from .config import AttributeRule, load_widget_config, WidgetConfig  # noqa: F401
from .const import BOOLEAN_ATTRIBUTES  # noqa: F401
from .exceptions import (  # noqa: F401
    AttributeResolutionError,
    FormDesignerException,
    InvalidAttributeError,
    InvalidWidgetConfigError,
)
from .fieldwidgets import FormLayoutWidget  # noqa: F401
from .filters import FilterPipeline  # noqa: F401
from .layout import FormLayout, TemplateResolver  # noqa: F401
from .resolver import AttributeResolver  # noqa: F401
from .widget import Widget  # noqa: F401
