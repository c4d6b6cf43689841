"""Turn the values collected in the UI into a split request payload"""
from typing import Any, Dict, List, Optional


def _number(value: Any) -> float:
    if value is None or value != value:  # NaN
        return 0.0
    return float(value)


def clean_rows(rows: List[Dict[str, Any]], number_field: str) -> List[Dict[str, Any]]:
    """
    Drop rows with a blank name and normalise the rest

    Editor rows come back with None or NaN for untouched cells; missing
    numbers are treated as zero.
    """
    cleaned = []
    for row in rows:
        name = row.get("name")
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            continue
        cleaned_row = dict(row)
        cleaned_row["name"] = name
        cleaned_row[number_field] = _number(row.get(number_field))
        if "is_shared" in row:
            is_shared = row["is_shared"]
            cleaned_row["is_shared"] = bool(is_shared) if is_shared == is_shared else False
        cleaned.append(cleaned_row)
    return cleaned


def build_split_payload(
    service_charge_percentage: float,
    items: List[Dict[str, Any]],
    diners: List[Dict[str, Any]],
    assignments: Optional[Dict[int, str]] = None
) -> Dict[str, Any]:
    """
    Build the JSON body for POST /api/v1/bills/split

    Args:
        service_charge_percentage: Service charge applied to every diner
        items: Rows with "name", "price" and "is_shared"
        diners: Rows with "name" and "tip_percentage"
        assignments: Item index -> diner name, for personal items

    Returns:
        Dictionary matching the backend's SplitBillRequest
    """
    assignments = assignments or {}
    return {
        "service_charge_percentage": str(service_charge_percentage),
        "items": [
            {
                "name": item["name"],
                "price": str(item["price"]),
                "is_shared": bool(item.get("is_shared")),
                "assigned_to": None if item.get("is_shared") else assignments.get(index),
            }
            for index, item in enumerate(items)
        ],
        "diners": [
            {"name": diner["name"], "tip_percentage": str(diner["tip_percentage"])}
            for diner in diners
        ],
    }
