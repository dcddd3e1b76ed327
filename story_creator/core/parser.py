import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# Checked in order with str.startswith on the stripped line.
CHOICE_MARKERS = ("1.", "2.", "Option 1:", "Option 2:")

FALLBACK_CHOICES = ["Continue forward", "Take another path"]

def _marker(line: str) -> Optional[str]:
    stripped = line.strip()
    for prefix in CHOICE_MARKERS:
        if stripped.startswith(prefix):
            return prefix
    return None

def _is_boundary(line: str) -> bool:
    # a blank line also closes the narrative portion
    return not line.strip() or _marker(line) is not None

def parse_response(raw_text: str) -> Tuple[str, List[str]]:
    """
    Split a model reply into (segment, [choice, choice]).

    Lines before the first marker or blank line form the segment. Marker
    lines after that point become choices with the marker stripped. Fewer
    than two choices means none of them are used and FALLBACK_CHOICES
    is returned instead.
    """
    lines = raw_text.splitlines()

    boundary = next((i for i, line in enumerate(lines) if _is_boundary(line)), len(lines))
    segment = " ".join(lines[:boundary]).strip()

    choices: List[str] = []
    for line in lines[boundary:]:
        prefix = _marker(line)
        if prefix is None:
            continue
        choices.append(line.strip()[len(prefix):].strip())

    if len(choices) < 2:
        logger.debug("Found %d choice line(s), using fallback choices", len(choices))
        return segment, list(FALLBACK_CHOICES)
    return segment, choices[:2]
