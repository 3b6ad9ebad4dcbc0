"""ACMG evidence classifiers."""

from acmgassign.classifiers.acgs2020 import Acgs2020Classifier
from acmgassign.classifiers.base import AcmgClassifier
from acmgassign.classifiers.points import PointsBasedClassifier

CLASSIFIERS = {
    "acgs2020": Acgs2020Classifier,
    "points": PointsBasedClassifier,
}


def get_classifier(name: str = "acgs2020") -> AcmgClassifier:
    """Classifier by name.

    Raises:
        ValueError: If the name is not one of CLASSIFIERS.
    """
    try:
        return CLASSIFIERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown classifier '{name}', expected one of {sorted(CLASSIFIERS)}") from None


__all__ = ["AcmgClassifier", "Acgs2020Classifier", "PointsBasedClassifier", "CLASSIFIERS", "get_classifier"]
