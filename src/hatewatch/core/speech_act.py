"""Speech-act classification (assertive, directive, commissive, expressive, declarative)."""

from .constants import ClassifierConstants
from .lexicon import (
    DIRECTIVE_PATTERN, VIOLENT_IMPERATIVE_PATTERN,
    COMMISSIVE_PATTERN, REVENGE_PATTERN,
    EXPRESSIVE_NEGATIVE_PATTERN, EXPRESSIVE_POSITIVE_PATTERN,
    DECLARATIVE_PATTERN, EXCLUSION_PATTERN,
    ACCUSATION_PATTERN,
)
from .models import SpeechAct, SpeechActType
from .text import lower


def classify_speech_act(text, is_hate: bool) -> SpeechAct:
    """Assign a speech-act type and subtype.

    Families are checked in a fixed order and the first match wins, since
    their markers overlap: directive, commissive, expressive, declarative,
    then assertive as the catch-all.
    """
    text = lower(text)

    if DIRECTIVE_PATTERN.search(text):
        if is_hate and VIOLENT_IMPERATIVE_PATTERN.search(text):
            return SpeechAct(SpeechActType.DIRECTIVE, "Ancaman/Perintah Kasar")
        return SpeechAct(SpeechActType.DIRECTIVE, "Perintah/Permintaan")

    if COMMISSIVE_PATTERN.search(text):
        if is_hate and REVENGE_PATTERN.search(text):
            return SpeechAct(SpeechActType.COMMISSIVE, "Janji Balas Dendam")
        return SpeechAct(SpeechActType.COMMISSIVE, "Janji/Komitmen")

    if EXPRESSIVE_NEGATIVE_PATTERN.search(text) or EXPRESSIVE_POSITIVE_PATTERN.search(text):
        if is_hate:
            return SpeechAct(SpeechActType.EXPRESSIVE, "Penghinaan/Ejekan")
        return SpeechAct(SpeechActType.EXPRESSIVE, "Ekspresi Perasaan")

    if DECLARATIVE_PATTERN.search(text):
        if is_hate and EXCLUSION_PATTERN.search(text):
            return SpeechAct(SpeechActType.DECLARATIVE, "Deklarasi Diskriminatif")
        return SpeechAct(SpeechActType.DECLARATIVE, "Pernyataan Status")

    if is_hate and ACCUSATION_PATTERN.search(text):
        return SpeechAct(SpeechActType.ASSERTIVE, "Tuduhan/Fitnah")
    return SpeechAct(SpeechActType.ASSERTIVE, "Pernyataan Fakta/Pendapat")


def is_aggressive(act: SpeechAct) -> bool:
    return any(marker in act.subtype for marker in ClassifierConstants.AGGRESSIVE_SUBTYPE_MARKERS)
