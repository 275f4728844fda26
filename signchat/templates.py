"""
Static gesture templates.

A template lists, per feature, either an accepted numeric range or a boolean
flag. Constraints are grouped by where the feature comes from: the left hand,
the right hand, or the pair of hands. Templates are parsed once from the
configuration and never mutated afterwards.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple, Union

from .features import HAND_FEATURE_NAMES, PAIR_FEATURE_NAMES


@dataclass(frozen=True)
class FeatureRange:
    """Inclusive numeric range."""
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


Constraint = Union[FeatureRange, bool]

SECTIONS = ("left_hand", "right_hand", "both_hands")

_EMPTY: Mapping[str, Constraint] = MappingProxyType({})


@dataclass(frozen=True)
class GestureTemplate:
    """Named rule set for one sign."""
    name: str
    requires_both_hands: bool = False
    left_hand: Mapping[str, Constraint] = field(default_factory=lambda: _EMPTY)
    right_hand: Mapping[str, Constraint] = field(default_factory=lambda: _EMPTY)
    both_hands: Mapping[str, Constraint] = field(default_factory=lambda: _EMPTY)

    def constraints(self) -> Iterator[Tuple[str, str, Constraint]]:
        """Yield (section, feature, constraint) for every constraint."""
        for section in SECTIONS:
            for feature, constraint in getattr(self, section).items():
                yield section, feature, constraint


def _parse_constraint(name: str, feature: str, raw: Any) -> Constraint:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, Mapping) and "min" in raw and "max" in raw:
        low, high = float(raw["min"]), float(raw["max"])
        if low > high:
            raise ValueError(f"Template {name!r}: {feature} has min > max ({low} > {high})")
        return FeatureRange(min=low, max=high)
    raise ValueError(
        f"Template {name!r}: {feature} must be a boolean or a {{min, max}} mapping, got {raw!r}"
    )


def _parse_section(name: str, section: str, raw: Mapping[str, Any]) -> Mapping[str, Constraint]:
    allowed = PAIR_FEATURE_NAMES if section == "both_hands" else HAND_FEATURE_NAMES
    parsed: Dict[str, Constraint] = {}
    for feature, value in raw.items():
        if feature not in allowed:
            raise ValueError(f"Template {name!r}: unknown {section} feature {feature!r}")
        parsed[feature] = _parse_constraint(name, feature, value)
    return MappingProxyType(parsed)


def parse_template(name: str, data: Mapping[str, Any]) -> GestureTemplate:
    """Build a GestureTemplate from its configuration mapping."""
    unknown = set(data) - set(SECTIONS) - {"requires_both_hands"}
    if unknown:
        raise ValueError(f"Template {name!r}: unknown keys {sorted(unknown)}")

    sections = {
        section: _parse_section(name, section, data[section])
        for section in SECTIONS
        if data.get(section)
    }
    return GestureTemplate(
        name=name,
        requires_both_hands=bool(data.get("requires_both_hands", False)),
        **sections,
    )


def parse_templates(data: Mapping[str, Mapping[str, Any]]) -> Tuple[GestureTemplate, ...]:
    """
    Parse the template table.

    Args:
        data: Mapping of gesture name to template settings

    Returns:
        Templates sorted by name, which fixes the tie-break order of matching
    """
    named = {str(name): settings for name, settings in data.items()}
    return tuple(parse_template(name, named[name]) for name in sorted(named))
