"""
Read-time reference expansion.

A record holds a list of ids under some field; expansion swaps that list for
the referenced records. ``lookup`` receives the ids and returns a mapping of
id -> record for the ones that exist. Order and duplicates follow the stored
list; ids with no record are dropped.
"""
from typing import Callable, Dict, Iterable, List

Lookup = Callable[[List[str]], Dict[str, dict]]


def _resolve(ids: Iterable[str], found: Dict[str, dict]) -> List[dict]:
    return [found[i] for i in ids if i in found]


def expand(record: dict, field: str, lookup: Lookup) -> dict:
    """Return a copy of ``record`` with ``record[field]`` expanded."""
    ids = record.get(field) or []
    expanded = dict(record)
    expanded[field] = _resolve(ids, lookup(list(ids)) if ids else {})
    return expanded


def expand_all(records: List[dict], field: str, lookup: Lookup) -> List[dict]:
    """Expand ``field`` on many records with a single lookup call."""
    wanted = []
    seen = set()
    for record in records:
        for ref in record.get(field) or []:
            if ref not in seen:
                seen.add(ref)
                wanted.append(ref)

    found = lookup(wanted) if wanted else {}
    result = []
    for record in records:
        expanded = dict(record)
        expanded[field] = _resolve(record.get(field) or [], found)
        result.append(expanded)
    return result
