"""Base model for all tricore-flash Pydantic models."""

from pydantic import BaseModel, ConfigDict


class TricoreFlashBaseModel(BaseModel):
    """Base model class for all tricore-flash Pydantic models.

    Strings are stripped, enums are stored by value and assignments are
    validated, so results stay consistent while a service fills them in.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
    )
