"""Live next-chord suggestions from a performer's recent chords.

Scoring combines five signals for every candidate degree:

1. First-order progression statistics (40 % weight).
2. Second-order statistics for the last two chords (30 % weight).
3. Root motion: a fifth up, a fourth up or a step, plus a separate pull
   toward the tonic. These stack, so V → I earns both.
4. Functional harmony: dominant → tonic, subdominant → dominant,
   tonic → subdominant (70 % weight).
5. A small random lift on every degree, and a larger one on iii and vii°,
   so suggestions stay varied.

Scores are normalised to probabilities and the strongest four returned. The
engine keeps no state between calls: everything it knows comes from the
history passed in.

Example:
	```python
	history = chordsmith.suggestion.ChordHistory()
	history.record(1, 0.0)
	history.record(5, 0.5)

	for suggestion in chordsmith.suggestion.suggest_next_chords(history.entries(), bpm=120, now=1.0):
		print(suggestion.degree, suggestion.probability, suggestion.reason)
	```
"""

import collections
import dataclasses
import enum
import math
import random
import typing

import chordsmith.intervals
import chordsmith.markov_chain


HISTORY_LIMIT = 20
TOP_SUGGESTIONS = 4
STARTER_COUNT = 3

FIRST_ORDER_WEIGHT = 0.40
SECOND_ORDER_WEIGHT = 0.30
FUNCTION_WEIGHT = 0.7
MISSING_PROBABILITY = 0.01

FIFTH_UP_BONUS = 0.15
FOURTH_UP_BONUS = 0.12
STEPWISE_BONUS = 0.08
TONIC_BONUS = 0.10

DOMINANT_TO_TONIC_BONUS = 0.20
SUBDOMINANT_TO_DOMINANT_BONUS = 0.15
TONIC_TO_SUBDOMINANT_BONUS = 0.12

CREATIVITY_RANGE = (0.05, 0.20)
COLOUR_BONUS = 0.1

STRONG_THRESHOLD = 0.3
MODERATE_THRESHOLD = 0.15
PREDICTABLE_THRESHOLD = 0.15

TONIC_FUNCTION: typing.FrozenSet[int] = frozenset({1, 3, 6})
SUBDOMINANT_FUNCTION: typing.FrozenSet[int] = frozenset({2, 4})
DOMINANT_FUNCTION: typing.FrozenSet[int] = frozenset({5, 7})

DEGREES: typing.Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)


class SuggestionCategory (str, enum.Enum):

	STRONG = "strong"
	MODERATE = "moderate"
	ADVENTUROUS = "adventurous"


@dataclasses.dataclass(frozen=True)
class ChordHistoryEntry:

	"""A chord the performer played: scale degree and when (in host time units)."""

	degree: int
	timestamp: float


@dataclasses.dataclass(frozen=True)
class ChordSuggestion:

	"""
	A candidate next chord.

	Attributes:
		degree: Scale degree 1-7.
		probability: Share of the total score, 0.0-1.0.
		reason: Plain-text explanation, e.g. ``"Common progression, Natural resolution"``.
		category: ``strong``, ``moderate`` or ``adventurous`` by probability.
	"""

	degree: int
	probability: float
	reason: str
	category: SuggestionCategory


@dataclasses.dataclass(frozen=True)
class SuggestionMatch:

	"""Where a played chord ranked among the suggestions (rank 1 is the top)."""

	rank: int
	probability: float


@dataclasses.dataclass(frozen=True)
class PlayingPattern:

	"""
	Summary statistics of a performer's recent playing.

	Attributes:
		average_interval: Mean time between consecutive chords.
		consistency: 1.0 for perfectly even timing, falling toward 0.0 as
			timing spreads.
		predictability: Share of chord changes that follow a common progression.
	"""

	average_interval: float = 0.0
	consistency: float = 0.0
	predictability: float = 0.0


# (degree, probability, reason) for a performer who has not played yet.
STARTERS: typing.List[typing.Tuple[int, float, str]] = [
	(1, 0.35, "Tonic (I) - Classic start"),
	(5, 0.25, "Dominant (V) - Bold start"),
	(4, 0.20, "Subdominant (IV) - Warm start"),
	(6, 0.12, "vi - Melancholic start"),
	(2, 0.08, "ii - Jazz influence"),
]


class ChordHistory:

	"""A rolling log of the most recent chords, owned by the host.

	Only the last ``HISTORY_LIMIT`` entries are kept, which is all the
	suggestion engine ever reads.
	"""

	def __init__ (self, limit: int = HISTORY_LIMIT) -> None:

		if limit < 1:
			raise ValueError("History limit must be at least 1")

		self._entries: typing.Deque[ChordHistoryEntry] = collections.deque(maxlen=limit)


	def record (self, degree: int, timestamp: float) -> ChordHistoryEntry:

		"""Append a played chord, discarding the oldest entry when full."""

		entry = ChordHistoryEntry(degree=chordsmith.intervals.validate_degree(degree), timestamp=timestamp)
		self._entries.append(entry)

		return entry


	def entries (self) -> typing.List[ChordHistoryEntry]:

		"""Return the logged chords, oldest first."""

		return list(self._entries)


	def clear (self) -> None:

		"""Forget every logged chord."""

		self._entries.clear()


	def __len__ (self) -> int:

		return len(self._entries)


def categorize (probability: float) -> SuggestionCategory:

	"""Return the category for a suggestion probability."""

	if probability > STRONG_THRESHOLD:
		return SuggestionCategory.STRONG

	if probability > MODERATE_THRESHOLD:
		return SuggestionCategory.MODERATE

	return SuggestionCategory.ADVENTUROUS


def fifths_bonus (source: int, target: int) -> float:

	"""Score root motion from ``source`` to ``target``.

	A fifth up, a fourth up and a step are mutually exclusive intervals; the
	tonic bonus is added on top of whichever applies.
	"""

	motion = (target - source) % 7
	bonus = 0.0

	if motion == 4:
		bonus += FIFTH_UP_BONUS
	elif motion == 3:
		bonus += FOURTH_UP_BONUS
	elif abs(target - source) == 1:
		bonus += STEPWISE_BONUS

	if target == 1:
		bonus += TONIC_BONUS

	return bonus


def function_bonus (source: int, target: int) -> float:

	"""Score the harmonic-function move from ``source`` to ``target``."""

	if source in DOMINANT_FUNCTION and target in TONIC_FUNCTION:
		return DOMINANT_TO_TONIC_BONUS

	if source in SUBDOMINANT_FUNCTION and target in DOMINANT_FUNCTION:
		return SUBDOMINANT_TO_DOMINANT_BONUS

	if source in TONIC_FUNCTION and target in SUBDOMINANT_FUNCTION:
		return TONIC_TO_SUBDOMINANT_BONUS

	return 0.0


def _starter_suggestions (rng: random.Random) -> typing.List[ChordSuggestion]:

	"""Pick three of the opening suggestions at random, strongest first."""

	starters = list(STARTERS)
	rng.shuffle(starters)
	chosen = sorted(starters[:STARTER_COUNT], key=lambda starter: -starter[1])

	return [
		ChordSuggestion(degree=degree, probability=probability, reason=reason, category=categorize(probability))
		for degree, probability, reason in chosen
	]


def score_next_chords (
	history: typing.Sequence[ChordHistoryEntry],
	rng: typing.Optional[random.Random] = None
) -> typing.List[ChordSuggestion]:

	"""Score every degree as the next chord and return all seven.

	The probabilities sum to 1. Results are ordered by probability, highest
	first, with ties kept in degree order.

	Raises:
		ValueError: If ``history`` is empty.
		InvalidDegreeError: If the last history entry is not a scale degree.
	"""

	if not history:
		raise ValueError("Cannot score next chords without any history")

	rng = rng or random.Random()
	recent = list(history)[-HISTORY_LIMIT:]

	last = chordsmith.intervals.validate_degree(recent[-1].degree)
	first_order = chordsmith.markov_chain.SUGGESTION_FIRST_ORDER[last]

	second_order: typing.Optional[typing.Dict[int, float]] = None
	has_pair = len(recent) >= 2

	if has_pair:
		pair = (recent[-2].degree, last)
		second_order = chordsmith.markov_chain.SUGGESTION_SECOND_ORDER.get(pair, {})

	scores: typing.List[typing.Tuple[int, float, typing.List[str]]] = []

	for degree in DEGREES:

		reasons: typing.List[str] = []

		markov_probability = first_order.get(degree, MISSING_PROBABILITY)
		score = markov_probability * FIRST_ORDER_WEIGHT
		if markov_probability > 0.2:
			reasons.append("Common progression")

		if second_order is not None:
			pattern_probability = second_order.get(degree, MISSING_PROBABILITY)
			score += pattern_probability * SECOND_ORDER_WEIGHT
			if pattern_probability > 0.3:
				reasons.append("Popular pattern")

		motion_bonus = fifths_bonus(last, degree)
		score += motion_bonus
		if motion_bonus > 0.10:
			reasons.append("Strong voice leading")

		resolution_bonus = function_bonus(last, degree)
		score += resolution_bonus * FUNCTION_WEIGHT
		if resolution_bonus > 0.10:
			reasons.append("Natural resolution")

		score += rng.uniform(*CREATIVITY_RANGE)
		if degree in chordsmith.markov_chain.COLOUR_DEGREES:
			score += COLOUR_BONUS
			reasons.append("Creative choice")

		scores.append((degree, score, reasons))

	total = sum(score for _, score, _ in scores)
	suggestions: typing.List[ChordSuggestion] = []

	for degree, score, reasons in scores:
		probability = score / total
		suggestions.append(ChordSuggestion(
			degree = degree,
			probability = probability,
			reason = ", ".join(reasons) or "Possible choice",
			category = categorize(probability)
		))

	# sorted() is stable, so equal probabilities stay in degree order.
	return sorted(suggestions, key=lambda suggestion: -suggestion.probability)


def suggest_next_chords (
	history: typing.Sequence[ChordHistoryEntry],
	bpm: typing.Optional[float] = None,
	now: typing.Optional[float] = None,
	rng: typing.Optional[random.Random] = None
) -> typing.List[ChordSuggestion]:

	"""Suggest the most likely next chords.

	With no history, three of five fixed opening chords are offered, chosen
	at random on each call. Otherwise the four best-scoring degrees from
	:func:`score_next_chords` are returned.

	Parameters:
		history: Recent chords, oldest first. Only the last 20 are read.
		bpm: Host tempo. Accepted for interface stability; not used in scoring.
		now: Host clock. Accepted for interface stability; not used in scoring.
		rng: Random number generator instance.
	"""

	rng = rng or random.Random()

	if not history:
		return _starter_suggestions(rng)

	return score_next_chords(history, rng)[:TOP_SUGGESTIONS]


def match_suggestion (played_degree: int, suggestions: typing.Sequence[ChordSuggestion]) -> typing.Optional[SuggestionMatch]:

	"""Return where ``played_degree`` ranked among ``suggestions``, or None if absent."""

	for index, suggestion in enumerate(suggestions):
		if suggestion.degree == played_degree:
			return SuggestionMatch(rank=index + 1, probability=suggestion.probability)

	return None


def analyze_playing_pattern (history: typing.Sequence[ChordHistoryEntry]) -> PlayingPattern:

	"""Summarise timing and harmonic habits; needs at least three chords.

	Example:
		```python
		history = [ChordHistoryEntry(5, 0.0), ChordHistoryEntry(1, 1.0), ChordHistoryEntry(5, 2.0)]
		analyze_playing_pattern(history)
		# PlayingPattern(average_interval=1.0, consistency=1.0, predictability=1.0)
		```
	"""

	if len(history) < 3:
		return PlayingPattern()

	history = list(history)

	gaps = [current.timestamp - previous.timestamp for previous, current in zip(history, history[1:])]
	average = sum(gaps) / len(gaps)

	variance = sum((gap - average) ** 2 for gap in gaps) / len(gaps)
	deviation = math.sqrt(variance)

	if average > 0:
		consistency = max(0.0, 1.0 - deviation / average)
	else:
		# Decision path: simultaneous or out-of-order timestamps have no tempo to be consistent with.
		consistency = 0.0

	matches = 0

	for previous, current in zip(history, history[1:]):
		row = chordsmith.markov_chain.SUGGESTION_FIRST_ORDER.get(previous.degree, {})
		if row.get(current.degree, 0.0) > PREDICTABLE_THRESHOLD:
			matches += 1

	return PlayingPattern(
		average_interval = average,
		consistency = consistency,
		predictability = matches / (len(history) - 1)
	)
