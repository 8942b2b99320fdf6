from .case import kebab_from_snake, camel_from_snake
from .outputs_from_exports import outputs_from_exports
