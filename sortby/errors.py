from typing import Any

from .lib.types.value import type_name


class IncomparableFieldError(TypeError) :
    """A sort field whose values have no natural ordering."""

    def __init__(self, field : str, field_type : Any) :
        self.field = field
        self.field_type = field_type
        super().__init__(f"Field {field} of type {type_name(field_type)} has no natural ordering")
