"""Tests for the ACMG classifiers."""

import pytest

from acmgassign.classifiers import Acgs2020Classifier, PointsBasedClassifier, get_classifier
from acmgassign.models.assignment import Classification
from acmgassign.models.evidence import EvidenceSet

P = Classification.PATHOGENIC
LP = Classification.LIKELY_PATHOGENIC
VUS = Classification.UNCERTAIN_SIGNIFICANCE
LB = Classification.LIKELY_BENIGN
B = Classification.BENIGN

PATHOGENIC_CASES = [
    "PVS1 PP5_VeryStrong",
    "PVS1 PS1",
    "PVS1 PS2",
    "PVS1 PS1 PS2 PS3",
    "PVS1 PM1",
    "PVS1 PM1 PM2 PM3 PM4",
    "PVS1 PP1 PP2",
    "PS1 PS2 PS3",
    "PS1 PS2 PM1",
    "PS1 PS2 PP1 PP2",
    "PS1 PM1 PM2 PM3",
    "PS1 PM1 PM2 PP1 PP2",
    "PS1 PM1 PP1 PP2 PP3 PP4",
]

LIKELY_PATHOGENIC_CASES = [
    "PVS1 PP1",
    "PS1 PS2",
    "PS1 PS2 PP1",
    "PS1 PM1",
    "PS1 PM1 PM2",
    "PS1 PP1 PP2",
    "PM1 PM2 PM3",
    "PM1 PM2 PP1 PP2",
    "PM1 PM2 PP1 PP2 PP3",
    "PM1 PP1 PP2 PP3 PP4",
]

UNCERTAIN_CASES = [
    "",
    "PS1",
    "PS1 PP1",
    "PM1 PM2",
    "PM1 PM2 PP1",
    "PM1",
    "PP1",
    "PP1 PP2",
    "PS1 BP1",
    "PP1 BP1",
]

LIKELY_BENIGN_CASES = [
    "BS1 BP1",
    "BP1 BP2",
    "BP1 BP2 BP3",
]

BENIGN_CASES = [
    "BA1",
    "BA1 BS1 BP1",
    "BS1 BS2",
    "BS1 BS2 BS3",
]


class TestAcgs2020Classifier:
    """Tests for the combinatorial classifier."""

    @pytest.fixture
    def classifier(self):
        return Acgs2020Classifier()

    @pytest.mark.parametrize("criteria", PATHOGENIC_CASES)
    def test_pathogenic(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is P

    @pytest.mark.parametrize("criteria", LIKELY_PATHOGENIC_CASES)
    def test_likely_pathogenic(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is LP

    @pytest.mark.parametrize("criteria", UNCERTAIN_CASES)
    def test_uncertain(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is VUS

    @pytest.mark.parametrize("criteria", LIKELY_BENIGN_CASES)
    def test_likely_benign(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is LB

    @pytest.mark.parametrize("criteria", BENIGN_CASES)
    def test_benign(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is B

    def test_empty_is_uncertain(self, classifier):
        assert classifier.classify(EvidenceSet.empty()) is VUS

    @pytest.mark.parametrize("criteria", [
        "PVS1 BS1 BP1",
        "PVS1 BS1 BS2",
        "PS1 PS2 BP1 BP2",
        "PM1 PM2 PM3 BS1 BS2",
        "BA1 PVS1 PS1",
        "BA1 PVS1",
        "PS3 PS4 PP1_Supporting PM3 PP4 BA1",
    ])
    def test_conflicting_evidence_is_uncertain(self, classifier, criteria):
        """Test that benign calls alongside pathogenic evidence give VUS."""
        assert classifier.classify(EvidenceSet.parse(criteria)) is VUS


class TestPointsBasedClassifier:
    """Tests for the points-based classifier."""

    @pytest.fixture
    def classifier(self):
        return PointsBasedClassifier()

    @pytest.mark.parametrize("criteria", PATHOGENIC_CASES)
    def test_pathogenic(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is P

    @pytest.mark.parametrize("criteria", LIKELY_PATHOGENIC_CASES + ["PM1 PP1 PP2 PP3 PP4 PP5"])
    def test_likely_pathogenic(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is LP

    @pytest.mark.parametrize("criteria", UNCERTAIN_CASES + ["PP1 PP2 PP3 PP4", "BP1 BP2 BP3 PM1 PP1 PP2 PP3 PP4"])
    def test_uncertain(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is VUS

    @pytest.mark.parametrize("criteria", LIKELY_BENIGN_CASES + ["BP4", "BP4_Moderate", "BP4_Moderate BP6"])
    def test_likely_benign(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is LB

    @pytest.mark.parametrize("criteria", BENIGN_CASES + [
        # would be a warm VUS if not for the BA1 hard filter
        "PS3 PS4 PP1_Supporting PM3 PP4 BA1",
        "BA1 PVS1 PS1",
    ])
    def test_benign(self, classifier, criteria):
        assert classifier.classify(EvidenceSet.parse(criteria)) is B

    def test_empty_is_uncertain(self, classifier):
        assert classifier.classify(EvidenceSet.empty()) is VUS

    @pytest.mark.parametrize("points, expected", [
        (11, P),
        (10, P),
        (9, LP),
        (8, LP),
        (7, LP),
        (6, LP),
        (5, VUS),
        (4, VUS),
        (1, VUS),
        (0, VUS),
        (-1, LB),
        (-4, LB),
        (-6, LB),
        (-7, B),
        (-8, B),
    ])
    def test_classification_boundaries(self, classifier, points, expected):
        assert classifier.classification(points) is expected

    def test_score_caps_each_direction(self, classifier):
        """Test pathogenic points are capped at 10 and benign at 8."""
        assert classifier.score(EvidenceSet.parse("PVS1 PS1 PS2 PS3")) == 10
        assert classifier.score(EvidenceSet.parse("BS1 BS2 BS3 BS4")) == -8
        # capped 10 - 4, uncapped would be 20 - 4
        assert classifier.score(EvidenceSet.parse("PVS1 PS1 PS2 PS3 BS1")) == 6

    def test_posterior_probability_uses_capped_score(self, classifier):
        evidence = EvidenceSet.parse("PVS1 PS1 PS2 PS3")
        assert classifier.posterior_probability(evidence) == pytest.approx(
            classifier.posterior_probability(EvidenceSet.parse("PVS1 PS1"))
        )
        assert round(classifier.posterior_probability(EvidenceSet.parse("PM1")), 3) == 0.325


class TestGetClassifier:
    """Tests for classifier selection."""

    def test_by_name(self):
        assert isinstance(get_classifier("acgs2020"), Acgs2020Classifier)
        assert isinstance(get_classifier("POINTS"), PointsBasedClassifier)
        assert isinstance(get_classifier(), Acgs2020Classifier)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown classifier"):
            get_classifier("bayesian")
