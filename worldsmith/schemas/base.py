import json
from typing import Any, Dict, List, Optional


def blank_to_none(value: Any) -> Any:
    """Treat an empty form field as an absent optional value"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def number_to_str(value: Any) -> Any:
    """Accept numbers for text columns such as challenge rating or hit points"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def split_comma_list(value: Any) -> Optional[List[str]]:
    """
    Accept either a list or a comma-separated string.

    "Fireball, Shield" becomes ["Fireball", "Shield"]; an empty string becomes [].
    """
    if value is None:
        return None
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def parse_ability_scores(value: Any) -> Optional[Dict[str, Any]]:
    """
    Accept ability scores as a mapping, a JSON object string, or
    comma-separated "KEY: score" pairs.

    Pairs whose score is not a whole number are skipped.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value

    if not value.strip():
        return {}

    try:
        parsed = json.loads(value)
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    scores: Dict[str, int] = {}
    for pair in value.split(","):
        key, sep, score = pair.partition(":")
        if not sep or not key.strip():
            continue
        try:
            scores[key.strip()] = int(score.strip())
        except ValueError:
            continue
    return scores
