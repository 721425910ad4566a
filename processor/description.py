"""Rendering of grouped event names into calendar descriptions."""
from typing import Dict, List

# Escaped newlines: the description is embedded in a calendar text field.
LINE_BREAK = "\\n"
SECTION_BREAK = LINE_BREAK * 2


def sort_names(names: List[str]) -> List[str]:
    """Sort event names case-insensitively, keeping ties in original order."""
    return sorted(names, key=str.lower)


def assemble_description(labels: Dict[str, List[str]]) -> str:
    """
    Render one group's labels and event names as description text.

    Labels appear in insertion order, each followed by its event names as
    "- name" lines. Line breaks are the two-character sequence backslash-n.

    Args:
        labels: Mapping of canonical label to cleaned event names

    Returns:
        Description text, e.g. "Men's 100m\\n- Heats"
    """
    description = ""
    for label, names in labels.items():
        description += SECTION_BREAK + label
        for name in sort_names(names):
            description += LINE_BREAK + "- " + name

    return description[len(SECTION_BREAK):]
