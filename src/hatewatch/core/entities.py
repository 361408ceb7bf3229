"""Entity/target extraction: who the comments talk about."""

from typing import Dict, List, Sequence

from .lexicon import KNOWN_GROUPS, KNOWN_NAMES, PRONOUNS
from .models import EntityTarget, EntityType
from .text import lower


def _record(entities: Dict[str, EntityTarget], name: str, etype: EntityType, comment: str) -> None:
    target = entities.get(name)
    if target is None:
        target = entities[name] = EntityTarget(entity=name, type=etype)
    target.mentions += 1
    if comment not in target.comments:
        target.comments.append(comment)


def extract_entities(comments: Sequence[str]) -> List[EntityTarget]:
    """Count pronoun, name and group mentions across a batch.

    Pronouns must appear as whitespace-separated tokens; names and groups
    match as substrings. Sorted by mention count, most mentioned first.
    """
    entities: Dict[str, EntityTarget] = {}

    for comment in comments or []:
        if not isinstance(comment, str):
            continue
        text = lower(comment)
        words = text.split()

        for pronoun in PRONOUNS:
            if pronoun in words:
                _record(entities, pronoun, EntityType.PRONOUN, comment)
        for name in KNOWN_NAMES:
            if name in text:
                _record(entities, name, EntityType.PERSON, comment)
        for group in KNOWN_GROUPS:
            if group in text:
                _record(entities, group, EntityType.GROUP, comment)

    return sorted(entities.values(), key=lambda e: -e.mentions)
