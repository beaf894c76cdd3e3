"""
Preset lookup shared by catcher games.

Games keep their own tables of named presets (difficulty tiers and the
like); this module resolves a requested name against such a table with a
predictable fallback.
"""

from typing import Dict, List, Optional, TypeVar

T = TypeVar('T')


def get_preset(
    presets: Dict[str, T],
    name: Optional[str],
    default: str = 'normal'
) -> T:
    """
    Get a preset by name with fallback.

    Args:
        presets: Dict mapping preset names to preset objects
        name: Requested preset name (case-insensitive, may be None)
        default: Fallback preset name if requested not found

    Returns:
        The preset object
    """
    if name:
        key = name.strip().lower()
        if key in presets:
            return presets[key]
    if default in presets:
        return presets[default]
    # Return first available
    return next(iter(presets.values()))


def is_known_preset(presets: Dict[str, T], name: Optional[str]) -> bool:
    """True if name resolves to a preset without falling back."""
    return bool(name) and name.strip().lower() in presets


def get_preset_names(presets: Dict[str, T]) -> List[str]:
    """Get list of preset names in table order."""
    return list(presets.keys())
