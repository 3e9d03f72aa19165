from .canvas import CanvasGroup, CanvasGroupLike, hide, show
from .json_names import external_name, from_external_name, json_property
from .strings import from_backing_field, to_backing_field

__all__ = [
    "CanvasGroup",
    "CanvasGroupLike",
    "hide",
    "show",
    "external_name",
    "from_external_name",
    "json_property",
    "from_backing_field",
    "to_backing_field",
]
