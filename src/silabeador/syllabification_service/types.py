"""
Syllabification Service Data Types

Pydantic models returned by the syllabification service. A result carries
both outputs of one computation (syllables and stress index) and checks
their invariants at construction.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# IPA primary stress mark
STRESS_MARK = "ˈ"


class SyllabificationResult(BaseModel):
    """
    Syllables and stressed-syllable index of one word.

    The stress index counts from the end: -1 is the last syllable. It is
    always within [-len(syllables), -1] and is -1 for words with fewer than
    two syllables.
    """

    word: str = Field(
        ...,
        description="Word exactly as passed to the service",
        examples=["canción", "Uvulopalatofaringoplastia"],
    )

    syllables: List[str] = Field(
        default_factory=list,
        description="Syllables in order; empty only for input without letters",
        examples=[["can", "ción"], ["ca", "sa"]],
    )

    stress: int = Field(
        default=-1,
        le=-1,
        description="Negative index of the stressed syllable",
        examples=[-1, -2, -3],
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @model_validator(mode="after")
    def _check_stress_range(self) -> "SyllabificationResult":
        count = len(self.syllables)
        if count <= 1 and self.stress != -1:
            raise ValueError(f"stress must be -1 for {count} syllable(s), got {self.stress}")
        if count > 1 and self.stress < -count:
            raise ValueError(f"stress {self.stress} out of range for {count} syllables")
        return self

    @property
    def syllable_count(self) -> int:
        return len(self.syllables)

    @property
    def syllabified(self) -> str:
        """Syllables joined with hyphens, e.g. 'can-ción'."""
        return "-".join(self.syllables)

    @property
    def stressed_syllable(self) -> str:
        """Text of the stressed syllable, empty for an empty word."""
        if not self.syllables:
            return ""
        return self.syllables[self.stress]


def format_stress_display(
    syllables: List[str],
    stress: Optional[int] = None,
    separator: str = "-",
) -> str:
    """
    Join syllables for display, marking the stressed one.

    Args:
        syllables: Syllables of one word
        stress: Negative stress index, or None for no mark
        separator: String placed between syllables

    Returns:
        Display string with an IPA stress mark before the stressed syllable

    Example:
        >>> format_stress_display(["can", "ción"], -1)
        'can-ˈción'
        >>> format_stress_display(["ca", "sa"])
        'ca-sa'
    """
    if stress is None or not syllables:
        return separator.join(syllables)

    marked = list(syllables)
    marked[stress] = STRESS_MARK + marked[stress]
    return separator.join(marked)
