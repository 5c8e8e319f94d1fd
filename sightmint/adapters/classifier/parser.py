"""
Tolerant parser for the classifier's two-line answer:

    Animal: Red Fox
    Description: A fox standing in a field

Malformed input never raises; it degrades to species "Unknown".
"""
from sightmint.orchestrator.contracts import ClassificationResult

UNKNOWN_SPECIES = "Unknown"
NO_ANIMAL = "No Animal"

_SPECIES_PREFIX = "Animal:"
_DESCRIPTION_PREFIX = "Description:"


def _value(line: str) -> str:
    return line.split(":", 1)[1].strip()


def parse_response(raw) -> ClassificationResult:
    text = raw if isinstance(raw, str) else ""
    species = None
    description = None

    for line in text.splitlines():
        # first occurrence wins
        if species is None and line.startswith(_SPECIES_PREFIX):
            species = _value(line)
        elif description is None and line.startswith(_DESCRIPTION_PREFIX):
            description = _value(line)

    species = species or UNKNOWN_SPECIES
    description = description or ""
    is_animal = not (
        species == UNKNOWN_SPECIES
        or species == NO_ANIMAL
        or NO_ANIMAL in text
    )
    return ClassificationResult(species=species, description=description, is_animal=is_animal)
