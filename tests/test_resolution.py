"""
Tests for target resolution layer.
"""
from collections import Counter

import pytest
from target_finder.config import TargetFinderConfig
from target_finder.exceptions import AmbiguousMatchError, ConfigurationError, NoMatchError
from target_finder.resolution import (
    FuzzyMessages,
    FuzzyTargetMatcher,
    ResolutionOutcome,
    ResolutionStatus,
    SubstringMessages,
    SubstringTargetMatcher,
    TargetResolver,
    classify_matches,
    create_target_resolver,
    ngram_bag,
    ngram_ratio,
    resolve,
)


@pytest.fixture
def system_tests():
    return ["rs/tests/foo_test", "rs/tests/bar_test", "rs/tests/baz_test"]


class TestSubstringTargetMatcher:
    """Tests for SubstringTargetMatcher."""

    def test_returns_all_containing_candidates_in_order(self, system_tests):
        """Test that every candidate containing the query is returned, in order."""
        matcher = SubstringTargetMatcher()

        assert matcher.find_matches("ba", system_tests) == [
            "rs/tests/bar_test",
            "rs/tests/baz_test",
        ]

    def test_case_sensitive(self, system_tests):
        """Test that matching does not normalize case."""
        matcher = SubstringTargetMatcher()

        assert matcher.find_matches("BAR", system_tests) == []

    def test_empty_query_matches_every_non_empty_candidate(self):
        """Test the degenerate empty-query case."""
        matcher = SubstringTargetMatcher()

        assert matcher.find_matches("", ["a", "", "b"]) == ["a", "b"]

    def test_duplicates_are_kept(self):
        """Test that duplicate candidates are treated as distinct occurrences."""
        matcher = SubstringTargetMatcher()

        assert matcher.find_matches("a_test", ["a_test", "a_test"]) == ["a_test", "a_test"]


class TestNgram:
    """Tests for the n-gram bag scorer."""

    def test_bag_collects_all_window_sizes(self):
        """Test that n-grams of every window size are counted."""
        assert ngram_bag("abcd", (2, 3)) == Counter(
            {"ab": 1, "bc": 1, "cd": 1, "abc": 1, "bcd": 1}
        )

    def test_window_longer_than_string_contributes_nothing(self):
        """Test that short strings produce no n-grams for large windows."""
        assert ngram_bag("ab", (3, 4)) == Counter()

    def test_identical_strings_score_100(self):
        assert ngram_ratio("consensus", "consensus") == 100.0

    def test_disjoint_strings_score_0(self):
        assert ngram_ratio("abc", "xyz") == 0.0

    def test_empty_strings_score_0(self):
        assert ngram_ratio("", "") == 0.0

    def test_score_cutoff(self):
        """Test that scores below the cutoff are reported as 0."""
        score = ngram_ratio("abcd", "abxy", bag_sizes=(2,))
        assert 0.0 < score < 100.0
        assert ngram_ratio("abcd", "abxy", bag_sizes=(2,), score_cutoff=score + 1) == 0.0


class TestFuzzyTargetMatcher:
    """Tests for FuzzyTargetMatcher."""

    def test_never_returns_more_than_limit(self):
        """Test that results are capped at the default limit of 7."""
        matcher = FuzzyTargetMatcher()
        candidates = [f"//rs/tests:case{i}_test" for i in range(12)]

        matches = matcher.find_matches("test", candidates)

        assert len(matches) == 7

    def test_custom_limit(self):
        """Test that the result limit is configurable."""
        matcher = FuzzyTargetMatcher(limit=3)
        candidates = [f"//rs/tests:case{i}_test" for i in range(12)]

        assert len(matcher.find_matches("test", candidates)) == 3

    def test_best_match_first(self):
        """Test that the closest candidate is ranked first."""
        matcher = FuzzyTargetMatcher()
        candidates = ["//rs/tests:nns_recovery", "//rs/tests:consensus_performance"]

        matches = matcher.find_matches("consensus_perf", candidates)

        assert matches[0] == "//rs/tests:consensus_performance"

    def test_excludes_candidates_without_common_ngrams(self):
        """Test that unrelated candidates are not returned."""
        matcher = FuzzyTargetMatcher()

        assert matcher.find_matches("zzz", ["aaa", "bbb"]) == []

    def test_never_returns_empty_strings(self):
        """Test that empty candidates are filtered out."""
        matcher = FuzzyTargetMatcher()

        matches = matcher.find_matches("foo", ["", "foo_test", ""])

        assert matches == ["foo_test"]

    def test_empty_candidates(self):
        """Test that an empty candidate list yields no matches."""
        assert FuzzyTargetMatcher().find_matches("foo", []) == []

    def test_deterministic(self):
        """Test that identical inputs give identical, order-stable results."""
        matcher = FuzzyTargetMatcher()
        candidates = [f"//rs/tests:upgrade_{i}_test" for i in range(10)]

        first = matcher.find_matches("upgrade_test", candidates)
        second = matcher.find_matches("upgrade_test", candidates)

        assert first == second

    def test_ties_keep_candidate_order(self):
        """Test that equally scored candidates keep their original order."""
        matcher = FuzzyTargetMatcher()

        assert matcher.find_matches("foo", ["foo_test", "foo_tset"]) == ["foo_test", "foo_tset"]

    def test_rapidfuzz_scorer(self):
        """Test that a rapidfuzz scorer can be selected."""
        matcher = FuzzyTargetMatcher(scorer="ratio", limit=1)

        matches = matcher.find_matches("bar_tset", ["foo_test", "bar_test"])

        assert matches == ["bar_test"]

    def test_unknown_scorer_rejected(self):
        with pytest.raises(ValueError, match="Unknown scorer"):
            FuzzyTargetMatcher(scorer="soundex")

    def test_invalid_limit_rejected(self):
        with pytest.raises(ValueError, match="Limit"):
            FuzzyTargetMatcher(limit=0)

    def test_invalid_bag_sizes_rejected(self):
        with pytest.raises(ValueError, match="Bag sizes"):
            FuzzyTargetMatcher(bag_sizes=(2, 0))


class TestClassifyMatches:
    """Tests for the shared 0 / 1 / many classification."""

    def test_zero_matches(self):
        outcome = classify_matches("q", [], 4, "substring", SubstringMessages())

        assert outcome.status is ResolutionStatus.NOT_FOUND
        assert outcome.target is None
        assert outcome.matches == ()

    def test_single_match(self):
        outcome = classify_matches("q", ["only"], 4, "fuzzy", FuzzyMessages())

        assert outcome.status is ResolutionStatus.RESOLVED
        assert outcome.target == "only"
        assert outcome.strategy_used == "fuzzy"

    def test_many_matches(self):
        outcome = classify_matches("q", ["a", "b"], 4, "fuzzy", FuzzyMessages())

        assert outcome.status is ResolutionStatus.AMBIGUOUS
        assert outcome.target is None
        assert outcome.matches == ("a", "b")


class TestSubstringResolution:
    """Tests for resolve() with substring matching."""

    def test_single_substring_match(self, system_tests):
        """Test that a unique substring resolves to that target."""
        outcome = resolve(system_tests, "bar", use_fuzzy=False)

        assert outcome.status is ResolutionStatus.RESOLVED
        assert outcome.target == "rs/tests/bar_test"
        assert outcome.strategy_used == "substring"
        assert "doesn't exist" in outcome.message
        assert "single substring match `rs/tests/bar_test`" in outcome.message

    def test_ambiguous_lists_matches_in_order(self):
        """Test that several substring matches are reported in candidate order."""
        outcome = resolve(["a_test", "ab_test"], "a")

        assert outcome.status is ResolutionStatus.AMBIGUOUS
        assert outcome.matches == ("a_test", "ab_test")
        assert outcome.message.endswith("following substring matches found:\na_test\nab_test")

    def test_no_match_reports_candidate_count_and_fuzzy_hint(self, system_tests):
        """Test that a miss names the query, candidate count and --fuzzy."""
        outcome = resolve(system_tests, "qux")

        assert outcome.status is ResolutionStatus.NOT_FOUND
        assert "None of the 3 existing targets" in outcome.message
        assert "`qux`" in outcome.message
        assert "ict test qux --fuzzy" in outcome.message

    def test_no_candidates(self):
        """Test resolution against an empty candidate list."""
        outcome = resolve([], "anything")

        assert outcome.status is ResolutionStatus.NOT_FOUND
        assert "None of the 0 existing targets" in outcome.message

    def test_exact_query_is_not_special_cased(self):
        """Test that an exact label still goes through ambiguity detection."""
        candidates = ["rs/tests/foo_test", "rs/tests/foo_test_long"]

        outcome = resolve(candidates, "rs/tests/foo_test")

        assert outcome.status is ResolutionStatus.AMBIGUOUS
        assert "rs/tests/foo_test" in outcome.matches

    def test_duplicates_are_ambiguous(self):
        """Test that duplicated candidates count as separate matches."""
        outcome = resolve(["a_test", "a_test"], "a_test")

        assert outcome.status is ResolutionStatus.AMBIGUOUS
        assert outcome.matches == ("a_test", "a_test")


class TestFuzzyResolution:
    """Tests for resolve() with fuzzy matching."""

    def test_single_fuzzy_match(self):
        """Test that a typo resolves when only one candidate is similar."""
        candidates = ["//rs/tests:xyz_qqq", "//rs/tests:consensus_performance"]

        outcome = resolve(candidates, "consensus_perfromance", use_fuzzy=True)

        assert outcome.status is ResolutionStatus.RESOLVED
        assert outcome.target == "//rs/tests:consensus_performance"
        assert outcome.strategy_used == "fuzzy"
        assert "a single fuzzy match" in outcome.message
        assert "doesn't exist" in outcome.message

    def test_no_fuzzy_matches(self):
        outcome = resolve(["aaa", "bbb"], "zzz", use_fuzzy=True)

        assert outcome.status is ResolutionStatus.NOT_FOUND
        assert outcome.message == "No fuzzy matches for target `zzz` were found."

    def test_multiple_fuzzy_matches(self):
        outcome = resolve(["foo_test", "foo_tset"], "foo", use_fuzzy=True)

        assert outcome.status is ResolutionStatus.AMBIGUOUS
        assert outcome.message == "Multiple fuzzy matches were found for `foo`:\nfoo_test\nfoo_tset"

    def test_fuzzy_ambiguity_capped(self):
        """Test that at most 7 fuzzy candidates are listed."""
        candidates = [f"//rs/tests:case{i}_test" for i in range(12)]

        outcome = resolve(candidates, "test", use_fuzzy=True)

        assert outcome.status is ResolutionStatus.AMBIGUOUS
        assert len(outcome.matches) == 7


class TestResolutionOutcome:
    """Tests for ResolutionOutcome."""

    def test_raise_for_status_returns_target_and_message(self, system_tests):
        target, message = resolve(system_tests, "foo").raise_for_status()

        assert target == "rs/tests/foo_test"
        assert "single substring match" in message

    def test_raise_for_status_no_match(self, system_tests):
        with pytest.raises(NoMatchError) as exc_info:
            resolve(system_tests, "qux").raise_for_status()

        assert exc_info.value.query == "qux"

    def test_raise_for_status_ambiguous(self, system_tests):
        with pytest.raises(AmbiguousMatchError) as exc_info:
            resolve(system_tests, "_test").raise_for_status()

        assert exc_info.value.matches == tuple(system_tests)

    def test_resolved_requires_target(self):
        with pytest.raises(ValueError):
            ResolutionOutcome(
                status=ResolutionStatus.RESOLVED,
                query="q",
                strategy_used="substring",
                message="",
            )

    def test_outcome_is_immutable(self, system_tests):
        outcome = resolve(system_tests, "foo")

        with pytest.raises(AttributeError):
            outcome.target = "other"


class TestTargetResolver:
    """Tests for TargetResolver construction."""

    def test_factory_applies_config(self):
        """Test that the factory wires config values into the matchers."""
        config = TargetFinderConfig(fuzzy_matches_count=2, command_name="find-test")
        resolver = create_target_resolver(config)
        candidates = [f"//rs/tests:case{i}_test" for i in range(5)]

        fuzzy = resolver.resolve(candidates, "test", use_fuzzy=True)
        missing = resolver.resolve(candidates, "nothing")

        assert len(fuzzy.matches) == 2
        assert "find-test nothing --fuzzy" in missing.message

    def test_custom_matcher(self):
        """Test that matchers can be injected."""
        resolver = TargetResolver(fuzzy_matcher=FuzzyTargetMatcher(limit=1))

        outcome = resolver.resolve(["foo_test", "foo_tset"], "foo", use_fuzzy=True)

        assert outcome.status is ResolutionStatus.RESOLVED
        assert outcome.target == "foo_test"

    def test_factory_rejects_unknown_scorer(self):
        """Test that invalid fuzzy settings surface as ConfigurationError."""
        config = TargetFinderConfig(fuzzy_scorer="soundex")

        with pytest.raises(ConfigurationError, match="soundex"):
            create_target_resolver(config)

    def test_closest_matches_best_first(self):
        """Test fuzzy suggestions over dynamic testnet targets."""
        resolver = TargetResolver()
        testnets = ["//rs/tests:small_testnet", "//rs/tests:large_testnet", "//rs/tests:xyz"]

        matches = resolver.closest_matches(testnets, "smal_testnet")

        assert matches[0] == "//rs/tests:small_testnet"
        assert len(matches) <= 7

    def test_closest_matches_respects_limit(self):
        resolver = create_target_resolver(TargetFinderConfig(fuzzy_matches_count=1))
        testnets = ["//rs/tests:small_testnet", "//rs/tests:large_testnet"]

        assert resolver.closest_matches(testnets, "testnet") == ["//rs/tests:small_testnet"]
