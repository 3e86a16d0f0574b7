from typing import Any, Dict, Mapping, Optional


def merge_configuration(
    minimal: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """Shallow merge: a top level key in `overrides` replaces the same key in `minimal`"""
    merged = dict(minimal)
    merged.update(overrides or {})
    return merged
