"""
Template matching of extracted hand features.
"""
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .features import FrameFeatures
from .templates import Constraint, FeatureRange, GestureTemplate
from .types import MatchResult


def check_feature_match(features: Mapping[str, object],
                        constraints: Mapping[str, Constraint]) -> Tuple[int, int]:
    """
    Compare observed features against one section of a template.

    Only features present on both sides are checked.

    Returns:
        (matched, checked) counts
    """
    matched = 0
    checked = 0
    for feature, constraint in constraints.items():
        if feature not in features:
            continue
        value = features[feature]
        if isinstance(constraint, FeatureRange):
            if constraint.contains(value):
                matched += 1
        elif value == constraint:
            matched += 1
        checked += 1
    return matched, checked


class TemplateMatcher:
    """
    Scores frame features against a fixed table of gesture templates.

    Templates are scored in name order so ties always resolve to the
    alphabetically first gesture.
    """

    def __init__(self, templates: Sequence[GestureTemplate]):
        self.templates: Tuple[GestureTemplate, ...] = tuple(
            sorted(templates, key=lambda t: t.name)
        )

    def score_template(self, template: GestureTemplate, frame: FrameFeatures) -> float:
        """Fraction of the template's applicable constraints that hold."""
        if template.requires_both_hands and not frame.has_both_hands:
            return 0.0

        matched = 0
        checked = 0
        observed = (
            (template.both_hands, frame.pair),
            (template.left_hand, frame.left),
            (template.right_hand, frame.right),
        )
        for constraints, features in observed:
            if not constraints or features is None:
                continue
            m, c = check_feature_match(features.as_dict(), constraints)
            matched += m
            checked += c

        return matched / checked if checked > 0 else 0.0

    def score(self, frame: FrameFeatures) -> Dict[str, float]:
        """Map every gesture name to its score in [0, 1]."""
        return {t.name: self.score_template(t, frame) for t in self.templates}

    def best_match(self, scores: Mapping[str, float]) -> Optional[MatchResult]:
        """
        Pick the highest-scoring gesture.

        Returns:
            MatchResult, or None if there are no templates or every score is 0
        """
        best: Optional[MatchResult] = None
        for template in self.templates:
            score = scores.get(template.name, 0.0)
            if score > (best.score if best else 0.0):
                best = MatchResult(name=template.name, score=score)
        return best

    def match(self, frame: FrameFeatures) -> Optional[MatchResult]:
        return self.best_match(self.score(frame))
