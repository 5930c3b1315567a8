"""
Cluster Joiner

Regroups raw segments into syllables. Consonants between two nuclei are
collected into an onset buffer; when the next nucleus arrives the buffer
is split between the coda of the previous syllable and the onset of the
new one.

Split rules for a buffer of two or more consonants, first match wins:
1. ends with an indivisible onset (pl, tr, ch...)  -> last two letters go right
2. starts with an indivisible coda (ns, st, mp...) and is longer than two
   -> first two letters stay left
3. last two letters form a sonority break           -> last letter goes right
4. otherwise                                        -> split at the media point
"""

from typing import List, Tuple

from silabeador.config import SyllabificationConfig
from silabeador.segmentation.character_classes import (
    CharacterClasses,
    Y_GLIDE_HOSTS,
    splits_by_sonority,
    starts_with_indivisible_coda,
)
from silabeador.utils.normalize_word import SENTINEL


def join(
    segments: List[str],
    classes: CharacterClasses,
    config: SyllabificationConfig,
) -> List[str]:
    """
    Join raw segments into syllables.

    Args:
        segments: Output of the nucleus splitter, left to right
        classes: Character classes for the active configuration
        config: Active configuration (consonantal h)

    Returns:
        Syllables in order; sentinels are consumed, never emitted
    """
    syllables: List[str] = []
    onset = ""
    media = 0

    for segment in segments:
        if segment == SENTINEL:
            # Forced break: pending consonants close the previous syllable
            if syllables:
                syllables[-1] += onset
                onset = ""

        elif classes.is_consonant_run(segment):
            if onset.endswith("y"):
                if onset == "y" and syllables and syllables[-1].endswith(tuple(Y_GLIDE_HOSTS)):
                    syllables[-1] += onset
                else:
                    syllables.append(onset)
                onset = segment
            else:
                onset += segment
                if syllables:
                    media = len(onset) // 2
                if config.consonantal_h and onset.endswith("h"):
                    media = 0

        else:
            coda, syllable = _split_onset(onset, segment, bool(syllables), classes, media)
            if coda:
                syllables[-1] += coda
            syllables.append(syllable)
            onset = ""

    if onset:
        _attach_trailing(syllables, onset)

    return [syllable.strip() for syllable in syllables]


def _split_onset(
    onset: str,
    nucleus: str,
    has_previous: bool,
    classes: CharacterClasses,
    media: int,
) -> Tuple[str, str]:
    """
    Distribute the onset buffer around a syllable boundary.

    Returns:
        (coda for the previous syllable, new syllable)
    """
    if len(onset) <= 1 or not has_previous:
        return "", onset + nucleus

    if classes.ends_with_indivisible_onset(onset):
        cut = len(onset) - 2
    elif starts_with_indivisible_coda(onset) and len(onset) > 2:
        cut = 2
    elif splits_by_sonority(onset):
        cut = len(onset) - 1
    else:
        cut = media

    return onset[:cut], onset[cut:] + nucleus


def _attach_trailing(syllables: List[str], onset: str) -> None:
    """Attach word-final consonants with no following nucleus."""
    if not syllables:
        syllables.append(onset)
    elif onset == "y":
        syllables[-1] += onset
    elif onset.endswith("y"):
        syllables[-1] += onset[:-2]
        syllables.append(onset[-2:])
    else:
        syllables[-1] += onset
