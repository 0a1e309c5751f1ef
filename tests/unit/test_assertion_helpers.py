"""assert_matches / assert_does_not_match."""

import pytest

from libs.probe_matchers import assert_does_not_match, assert_matches, ensure_exclusion_of, validate_presence_of
from tests.tools.fakes import FakeEntity, excluding, requiring


pytestmark = pytest.mark.unit


def test_assert_matches_passes():
    assert_matches(FakeEntity(rules={"arms": requiring()}), validate_presence_of("arms"))


def test_assert_matches_raises_failure_message():
    with pytest.raises(AssertionError, match="Expected errors to include 'blank' when arms is set to None"):
        assert_matches(FakeEntity(), validate_presence_of("arms"))


def test_assert_does_not_match_passes():
    assert_does_not_match(FakeEntity(), validate_presence_of("arms"))


def test_assert_does_not_match_raises_negated_message():
    entity = FakeEntity(rules={"os": excluding(["Mac", "Linux"])})

    with pytest.raises(AssertionError, match="Did not expect to ensure exclusion of os in"):
        assert_does_not_match(entity, ensure_exclusion_of("os").in_array(["Mac", "Linux"]))


@pytest.mark.parametrize("accepts_blank", [True, False])
def test_negation_consistency(accepts_blank):
    """A match exposes a negated message, a mismatch a failure message."""
    entity = FakeEntity() if accepts_blank else FakeEntity(rules={"arms": requiring()})
    matcher = validate_presence_of("arms")

    if matcher.matches(entity):
        assert matcher.negated_failure_message
    else:
        assert matcher.failure_message
