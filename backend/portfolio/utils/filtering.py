# portfolio/utils/filtering.py
from typing import Any, Dict, Iterable, List, Optional, Sequence

ALL = "All"


def _contains(value: Any, term: str) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(_contains(item, term) for item in value)
    return term in str(value).lower()


def matches_search(record: Dict[str, Any], search: Optional[str], fields: Sequence[str]) -> bool:
    if not search:
        return True
    term = search.lower()
    return any(_contains(record.get(field), term) for field in fields)


def matches_facet(record: Dict[str, Any], facet_value: Optional[str], facet_fields: Sequence[str]) -> bool:
    """A record matches when any of `facet_fields` equals the selected value."""
    if not facet_value or facet_value == ALL:
        return True
    wanted = facet_value.lower()
    return any(
        record.get(field) is not None and str(record.get(field)).lower() == wanted
        for field in facet_fields
    )


def filter_records(
    records: Iterable[Dict[str, Any]],
    *,
    search: Optional[str] = None,
    search_fields: Sequence[str] = (),
    facets: Optional[Dict[str, tuple]] = None,
) -> List[Dict[str, Any]]:
    """
    Filter serialized records in process.

    `facets` maps a selected value to the fields it is compared against:
        {"category": ("Web Apps", ("category", "subcategory"))}

    Order of `records` is preserved.
    """
    facets = facets or {}
    return [
        record
        for record in records
        if matches_search(record, search, search_fields)
        and all(
            matches_facet(record, value, fields)
            for value, fields in facets.values()
        )
    ]


def facet_values(records: Iterable[Dict[str, Any]], field: str) -> List[str]:
    """["All", ...unique non-empty values in first-seen order]"""
    values: List[str] = [ALL]
    for record in records:
        value = record.get(field)
        if value and value not in values:
            values.append(value)
    return values
