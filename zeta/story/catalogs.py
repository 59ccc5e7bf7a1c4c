"""
Option catalogs.

Six fixed, read-only lookup tables (identifier -> CatalogEntry), one per
question. Identifiers are the stable storage keys kept in an AnswerSet;
labels are the display text substituted into prompts.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class CatalogEntry:
    """A selectable option."""

    id: str
    label: str
    description: Optional[str] = None


Catalog = Mapping[str, CatalogEntry]


def _catalog(entries: Iterable[CatalogEntry]) -> Catalog:
    table = {}
    for entry in entries:
        if entry.id in table:
            raise ValueError(f"Duplicate catalog id: {entry.id}")
        table[entry.id] = entry
    return MappingProxyType(table)


CHARACTERS = _catalog([
    CatalogEntry("child", "A Child"),
    CatalogEntry("animal", "An Animal"),
    CatalogEntry("magical_creature", "Magical Creature"),
    CatalogEntry("superhero", "A Superhero"),
    CatalogEntry("toy", "A Favorite Toy"),
])

LOCATIONS = _catalog([
    CatalogEntry("forest", "Enchanted Forest"),
    CatalogEntry("castle", "Magical Castle"),
    CatalogEntry("space", "Outer Space"),
    CatalogEntry("under_the_sea", "Under the Sea"),
    CatalogEntry("bedroom", "Cozy Bedroom"),
    CatalogEntry("cave", "Crystal Cave"),
])

HELPERS = _catalog([
    CatalogEntry("talking_animal", "Talking Animal"),
    CatalogEntry("fairy_godparent", "Fairy Godparent"),
    CatalogEntry("friendly_robot", "Friendly Robot"),
    CatalogEntry("wise_grandparent", "Wise Grandparent"),
    CatalogEntry("magical_toy", "Magical Toy"),
])

CHALLENGES = _catalog([
    CatalogEntry(
        "finding_something_lost",
        "Finding Something Lost",
        "A precious item has vanished and must be found.",
    ),
    CatalogEntry(
        "facing_a_scary_shadow",
        "Facing a Scary Shadow",
        "Mustering the courage to see what lurks in the dark.",
    ),
    CatalogEntry(
        "making_a_new_friend",
        "Making a New Friend",
        "Overcoming shyness to say hello to someone new.",
    ),
    CatalogEntry(
        "learning_an_important_lesson",
        "Learning a Lesson",
        "About being brave, kind, or trying new things.",
    ),
    CatalogEntry(
        "getting_ready_for_bedtime",
        "Getting Ready for Bed",
        "The final, cozy adventure before drifting off to sleep.",
    ),
])

MAGICAL_ELEMENTS = _catalog([
    CatalogEntry("flying", "Flying"),
    CatalogEntry("talking_to_animals", "Talking to Animals"),
    CatalogEntry("size_change", "Growing Tiny/Giant"),
    CatalogEntry("time_travel", "Time Travel"),
    CatalogEntry("objects_come_alive", "Objects Come Alive"),
])

ENDINGS = _catalog([
    CatalogEntry("peaceful_sleep", "Peaceful Sleep"),
    CatalogEntry("happy_dreams", "Happy Dreams"),
    CatalogEntry("feeling_brave", "Feeling Brave"),
    CatalogEntry("learning_new", "Learning Something"),
    CatalogEntry("family_cuddles", "Family Cuddles"),
])


def lookup_label(catalog: Catalog, option_id: Optional[str]) -> Optional[str]:
    """Return the label for option_id, or None if absent or unknown."""
    if not option_id:
        return None
    entry = catalog.get(option_id)
    return entry.label if entry else None
