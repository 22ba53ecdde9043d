"""
Roster loading for the CLI.

Accepts a JSON list (names or {"name": ...} objects) or plain text with
one name per line. Blank lines and lines starting with '#' are skipped.
"""
import json
from pathlib import Path
from typing import List

from allstars_sim.exceptions import RosterError


def parse_roster(text: str) -> List[str]:
    """Parse roster text into competitor names, preserving order."""
    stripped = text.strip()
    if stripped.startswith("["):
        try:
            entries = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise RosterError(f"Invalid JSON roster: {e}") from e
        
        names = []
        for position, entry in enumerate(entries):
            if isinstance(entry, str):
                names.append(entry)
            elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
                names.append(entry["name"])
            else:
                raise RosterError(f"Roster entry {position} has no name: {entry!r}")
        return names
    
    return [
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]


def load_roster(path: Path) -> List[str]:
    """Read and parse a roster file."""
    path = Path(path)
    if not path.exists():
        raise RosterError(f"Roster file not found: {path}")
    names = parse_roster(path.read_text(encoding="utf-8"))
    if len(set(names)) != len(names):
        raise RosterError(f"Roster {path} contains duplicate names")
    return names
