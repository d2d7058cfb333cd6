import random
import unittest

import pytest

import chordsmith.exceptions
import chordsmith.markov_chain
import chordsmith.suggestion


def _history (*degrees: int, spacing: float = 0.5) -> list:

	return [chordsmith.suggestion.ChordHistoryEntry(degree, index * spacing) for index, degree in enumerate(degrees)]


def test_empty_history_offers_starters () -> None:

	"""Three distinct opening chords from the fixed starter list, strongest first."""

	starters = {degree: (probability, reason) for degree, probability, reason in chordsmith.suggestion.STARTERS}

	for seed in range(20):

		suggestions = chordsmith.suggestion.suggest_next_chords([], rng=random.Random(seed))

		assert len(suggestions) == 3
		assert len({s.degree for s in suggestions}) == 3

		for suggestion in suggestions:
			assert (suggestion.probability, suggestion.reason) == starters[suggestion.degree]
			assert suggestion.category == chordsmith.suggestion.categorize(suggestion.probability)

		probabilities = [s.probability for s in suggestions]
		assert probabilities == sorted(probabilities, reverse=True)


def test_starters_vary_between_calls () -> None:

	"""Different draws offer different starter sets."""

	rng = random.Random(1)
	seen = {tuple(s.degree for s in chordsmith.suggestion.suggest_next_chords([], rng=rng)) for _ in range(30)}

	assert len(seen) > 1


def test_full_distribution_sums_to_one () -> None:

	"""Scoring covers all seven degrees and normalises them."""

	suggestions = chordsmith.suggestion.score_next_chords(_history(1, 5, 6), rng=random.Random(3))

	assert sorted(s.degree for s in suggestions) == [1, 2, 3, 4, 5, 6, 7]
	assert sum(s.probability for s in suggestions) == pytest.approx(1.0)

	probabilities = [s.probability for s in suggestions]
	assert probabilities == sorted(probabilities, reverse=True)


def test_score_requires_history () -> None:

	with pytest.raises(ValueError):
		chordsmith.suggestion.score_next_chords([])


def test_top_four_returned () -> None:

	"""Suggestions are the four best of the full ranking."""

	history = _history(1, 4)

	full = chordsmith.suggestion.score_next_chords(history, rng=random.Random(8))
	top = chordsmith.suggestion.suggest_next_chords(history, bpm=90, now=2.0, rng=random.Random(8))

	assert len(top) == 4
	assert top == full[:4]


def test_categories_follow_thresholds () -> None:

	for seed in range(20):
		for suggestion in chordsmith.suggestion.score_next_chords(_history(2, 5), rng=random.Random(seed)):
			if suggestion.probability > 0.3:
				assert suggestion.category == chordsmith.suggestion.SuggestionCategory.STRONG
			elif suggestion.probability > 0.15:
				assert suggestion.category == chordsmith.suggestion.SuggestionCategory.MODERATE
			else:
				assert suggestion.category == chordsmith.suggestion.SuggestionCategory.ADVENTUROUS


def test_dominant_resolves_to_tonic () -> None:

	"""After V the tonic is the top suggestion, with every reason that applies."""

	for seed in range(20):

		top = chordsmith.suggestion.suggest_next_chords(_history(5), rng=random.Random(seed))[0]

		assert top.degree == 1
		assert top.reason == "Common progression, Strong voice leading, Natural resolution"


def test_colour_degrees_are_creative_choices () -> None:

	"""iii and vii° always carry the creative-choice reason."""

	for suggestion in chordsmith.suggestion.score_next_chords(_history(1, 5), rng=random.Random(0)):
		if suggestion.degree in (3, 7):
			assert "Creative choice" in suggestion.reason
		else:
			assert "Creative choice" not in suggestion.reason


def test_popular_pattern_reason () -> None:

	"""I-V is followed by vi as a popular pattern."""

	suggestions = chordsmith.suggestion.score_next_chords(_history(1, 5), rng=random.Random(2))
	vi = next(s for s in suggestions if s.degree == 6)

	assert "Popular pattern" in vi.reason


def test_possible_choice_reason () -> None:

	"""A degree with no supporting signal gets the fallback reason."""

	suggestions = chordsmith.suggestion.score_next_chords(_history(1), rng=random.Random(2))
	iii = next(s for s in suggestions if s.degree == 3)
	tonic = next(s for s in suggestions if s.degree == 1)

	assert iii.reason == "Creative choice"
	assert tonic.reason == "Possible choice"


def test_only_recent_history_is_read () -> None:

	"""Chords older than the last 20 do not change the scores."""

	recent = _history(*([1, 4, 5, 1] * 5))
	older = _history(*([6, 2, 3] * 4)) + recent

	assert chordsmith.suggestion.score_next_chords(older, rng=random.Random(5)) == chordsmith.suggestion.score_next_chords(recent, rng=random.Random(5))


def test_invalid_last_degree () -> None:

	with pytest.raises(chordsmith.exceptions.InvalidDegreeError):
		chordsmith.suggestion.score_next_chords(_history(1, 9))


class BonusTests (unittest.TestCase):

	def test_fifths_bonus (self) -> None:

		"""Interval bonuses are exclusive; the tonic bonus stacks on top."""

		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(4, 1), 0.25)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(5, 1), 0.22)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(1, 5), 0.15)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(1, 4), 0.12)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(1, 2), 0.08)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(2, 1), 0.18)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(7, 1), 0.10)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(1, 1), 0.10)
		self.assertAlmostEqual(chordsmith.suggestion.fifths_bonus(3, 5), 0.0)

	def test_function_bonus (self) -> None:

		self.assertAlmostEqual(chordsmith.suggestion.function_bonus(5, 1), 0.20)
		self.assertAlmostEqual(chordsmith.suggestion.function_bonus(7, 6), 0.20)
		self.assertAlmostEqual(chordsmith.suggestion.function_bonus(2, 5), 0.15)
		self.assertAlmostEqual(chordsmith.suggestion.function_bonus(1, 4), 0.12)
		self.assertAlmostEqual(chordsmith.suggestion.function_bonus(4, 1), 0.0)
		self.assertAlmostEqual(chordsmith.suggestion.function_bonus(5, 5), 0.0)


def test_match_suggestion () -> None:

	suggestions = chordsmith.suggestion.score_next_chords(_history(5), rng=random.Random(4))[:4]

	match = chordsmith.suggestion.match_suggestion(1, suggestions)

	assert match == chordsmith.suggestion.SuggestionMatch(rank=1, probability=suggestions[0].probability)

	absent = next(degree for degree in range(1, 8) if degree not in {s.degree for s in suggestions})
	assert chordsmith.suggestion.match_suggestion(absent, suggestions) is None


def test_pattern_needs_three_chords () -> None:

	assert chordsmith.suggestion.analyze_playing_pattern(_history(1, 5)) == chordsmith.suggestion.PlayingPattern()


def test_pattern_even_and_predictable () -> None:

	"""Evenly spaced V-I alternation is fully consistent and predictable."""

	pattern = chordsmith.suggestion.analyze_playing_pattern(_history(5, 1, 5, 1, spacing=0.5))

	assert pattern.average_interval == pytest.approx(0.5)
	assert pattern.consistency == pytest.approx(1.0)
	assert pattern.predictability == pytest.approx(1.0)


def test_pattern_uneven_and_unpredictable () -> None:

	"""Uneven timing lowers consistency; rare moves lower predictability."""

	history = [
		chordsmith.suggestion.ChordHistoryEntry(3, 0.0),
		chordsmith.suggestion.ChordHistoryEntry(7, 1.0),
		chordsmith.suggestion.ChordHistoryEntry(2, 1.5),
		chordsmith.suggestion.ChordHistoryEntry(5, 4.0),
	]

	pattern = chordsmith.suggestion.analyze_playing_pattern(history)

	assert 0.0 <= pattern.consistency < 1.0
	# 3-7 and 7-2 are rare; 2-5 is common.
	assert pattern.predictability == pytest.approx(1 / 3)


def test_pattern_with_identical_timestamps () -> None:

	pattern = chordsmith.suggestion.analyze_playing_pattern(_history(1, 4, 5, spacing=0.0))

	assert pattern.average_interval == 0.0
	assert pattern.consistency == 0.0


def test_history_is_bounded () -> None:

	"""The rolling history keeps only the newest 20 chords."""

	history = chordsmith.suggestion.ChordHistory()

	for index in range(25):
		history.record(index % 7 + 1, float(index))

	entries = history.entries()

	assert len(history) == 20
	assert entries[0].timestamp == 5.0
	assert entries[-1].timestamp == 24.0

	history.clear()
	assert len(history) == 0


def test_history_rejects_bad_degrees () -> None:

	history = chordsmith.suggestion.ChordHistory()

	with pytest.raises(chordsmith.exceptions.InvalidDegreeError):
		history.record(0, 0.0)

	with pytest.raises(ValueError):
		chordsmith.suggestion.ChordHistory(limit=0)


class ConstantRandom (random.Random):

	"""Every uniform draw returns the same value."""

	def uniform (self, a: float, b: float) -> float:
		return 0.1


def test_ties_keep_degree_order (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Degrees with equal scores are listed in ascending degree order."""

	row = {1: 0.1, 2: 0.3, 3: 0.1, 4: 0.1, 5: 0.1, 6: 0.3, 7: 0.1}

	monkeypatch.setitem(chordsmith.markov_chain.SUGGESTION_FIRST_ORDER, 4, row)
	monkeypatch.setattr(chordsmith.suggestion, "fifths_bonus", lambda source, target: 0.0)
	monkeypatch.setattr(chordsmith.suggestion, "function_bonus", lambda source, target: 0.0)
	monkeypatch.setattr(chordsmith.suggestion, "COLOUR_BONUS", 0.0)

	suggestions = chordsmith.suggestion.score_next_chords(_history(4), rng=ConstantRandom())

	assert [s.degree for s in suggestions] == [2, 6, 1, 3, 4, 5, 7]
	assert suggestions[0].probability == suggestions[1].probability
	assert len({s.probability for s in suggestions[2:]}) == 1
