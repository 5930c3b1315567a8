"""
Syllabification Configuration

Immutable option set shared by every stage of the pipeline. A config is
validated once, at construction, and never changes during a call.

Usage:
    from silabeador.config import SyllabificationConfig

    config = SyllabificationConfig(exception_level=2, ipa=True)
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from silabeador.errors import InvalidConfiguration


def invalid_configuration(exc: ValidationError) -> InvalidConfiguration:
    """Convert a pydantic validation failure into the package error."""
    return InvalidConfiguration(
        f"Invalid syllabification config: {exc.errors(include_url=False)}"
    )


class SyllabificationConfig(BaseModel):
    """
    Options controlling syllabification and stress detection.

    Out-of-range or mistyped values raise InvalidConfiguration instead of
    being coerced, whether the config is built directly or through
    model_validate / model_validate_json.
    """

    exception_level: int = Field(
        default=1,
        ge=0,
        le=2,
        description=(
            "0 = no exception table and no Latin pass, "
            "1 = exception table and Latin pass, "
            "2 = additionally force hiatus in fie-/sua-/rui- words"
        ),
        examples=[0, 1, 2],
    )

    ipa: bool = Field(
        default=False,
        description="Treat the glides j and w as vowels and close vowels (IPA input)",
    )

    consonantal_h: bool = Field(
        default=False,
        description="Treat h as an audible consonant instead of a silent letter",
    )

    epenthesis: bool = Field(
        default=False,
        description="Insert a prothetic e before word-initial s + consonant",
    )

    indivisible_tl: bool = Field(
        default=False,
        description="Treat tl as an indivisible onset (Mexican Spanish: a-tlas)",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise invalid_configuration(exc) from exc

    @classmethod
    def model_validate(cls, obj, **kwargs):
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as exc:
            raise invalid_configuration(exc) from exc

    @classmethod
    def model_validate_json(cls, json_data, **kwargs):
        try:
            return super().model_validate_json(json_data, **kwargs)
        except ValidationError as exc:
            raise invalid_configuration(exc) from exc

    @property
    def hiatus(self) -> bool:
        """True when the hiatus prefixes are enabled."""
        return self.exception_level > 1


DEFAULT_CONFIG = SyllabificationConfig()
