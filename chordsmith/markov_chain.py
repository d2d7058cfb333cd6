"""Progression statistics and weighted degree selection.

Two families of transition tables live here, both keyed by 1-based scale
degree:

- ``FIRST_ORDER`` / ``SECOND_ORDER`` drive the batch generator.
- ``SUGGESTION_FIRST_ORDER`` / ``SUGGESTION_SECOND_ORDER`` drive live
  next-chord suggestions.

Rows need not sum to 1. They are relative weights, normalised at use.

All selection goes through :func:`weighted_select`, which walks an explicitly
ordered list of ``(degree, weight)`` pairs so the tie-break order is
ascending degree regardless of how a table was written.
"""

import logging
import random
import typing

import chordsmith.tension


logger = logging.getLogger(__name__)


TONIC = 1

DegreeWeights = typing.List[typing.Tuple[int, float]]


FIRST_ORDER: typing.Dict[int, typing.Dict[int, float]] = {
	1: {1: 0.05, 2: 0.15, 3: 0.03, 4: 0.30, 5: 0.25, 6: 0.20, 7: 0.02},
	2: {1: 0.20, 2: 0.01, 3: 0.03, 4: 0.15, 5: 0.50, 6: 0.10, 7: 0.01},
	3: {1: 0.07, 2: 0.15, 3: 0.02, 4: 0.25, 5: 0.10, 6: 0.40, 7: 0.01},
	4: {1: 0.30, 2: 0.15, 3: 0.03, 4: 0.05, 5: 0.35, 6: 0.10, 7: 0.02},
	5: {1: 0.50, 2: 0.08, 3: 0.01, 4: 0.12, 5: 0.03, 6: 0.25, 7: 0.01},
	6: {1: 0.15, 2: 0.25, 3: 0.05, 4: 0.30, 5: 0.20, 6: 0.03, 7: 0.02},
	7: {1: 0.70, 2: 0.01, 3: 0.15, 4: 0.01, 5: 0.03, 6: 0.10, 7: 0.00},
}

# Keyed by (chord before last, last chord).
SECOND_ORDER: typing.Dict[typing.Tuple[int, int], typing.Dict[int, float]] = {
	# Pop
	(1, 5): {1: 0.15, 2: 0.05, 4: 0.30, 6: 0.50},
	(5, 6): {1: 0.25, 2: 0.05, 4: 0.60, 5: 0.10},
	(6, 4): {1: 0.45, 2: 0.10, 5: 0.40, 6: 0.05},
	(4, 1): {2: 0.10, 4: 0.15, 5: 0.50, 6: 0.25},
	# Jazz
	(2, 5): {1: 0.70, 3: 0.05, 4: 0.10, 6: 0.15},
	(6, 2): {1: 0.25, 4: 0.10, 5: 0.60, 6: 0.05},
	# Tension builders
	(1, 4): {1: 0.25, 2: 0.15, 5: 0.50, 6: 0.10},
	(4, 5): {1: 0.70, 3: 0.05, 4: 0.05, 6: 0.20},
	# Colour
	(1, 3): {2: 0.20, 4: 0.30, 5: 0.10, 6: 0.40},
	(3, 6): {1: 0.10, 2: 0.40, 4: 0.35, 5: 0.15},
}

# Used when no chord has been chosen yet.
OPENING_WEIGHTS: typing.Dict[int, float] = {1: 0.6, 4: 0.1, 5: 0.3}


SUGGESTION_FIRST_ORDER: typing.Dict[int, typing.Dict[int, float]] = {
	1: {1: 0.05, 2: 0.10, 3: 0.03, 4: 0.35, 5: 0.25, 6: 0.20, 7: 0.02},
	2: {1: 0.25, 2: 0.05, 3: 0.03, 4: 0.15, 5: 0.40, 6: 0.10, 7: 0.02},
	3: {1: 0.20, 2: 0.05, 3: 0.03, 4: 0.25, 5: 0.10, 6: 0.35, 7: 0.02},
	4: {1: 0.30, 2: 0.20, 3: 0.03, 4: 0.05, 5: 0.25, 6: 0.15, 7: 0.02},
	5: {1: 0.50, 2: 0.08, 3: 0.02, 4: 0.15, 5: 0.04, 6: 0.20, 7: 0.01},
	6: {1: 0.15, 2: 0.25, 3: 0.03, 4: 0.30, 5: 0.20, 6: 0.05, 7: 0.02},
	7: {1: 0.60, 2: 0.01, 3: 0.10, 4: 0.05, 5: 0.03, 6: 0.20, 7: 0.01},
}

SUGGESTION_SECOND_ORDER: typing.Dict[typing.Tuple[int, int], typing.Dict[int, float]] = {
	(1, 5): {1: 0.15, 2: 0.05, 3: 0.01, 4: 0.25, 5: 0.03, 6: 0.50, 7: 0.01},  # I-V-vi-IV
	(5, 6): {1: 0.20, 2: 0.05, 3: 0.01, 4: 0.55, 5: 0.15, 6: 0.03, 7: 0.01},
	(6, 4): {1: 0.40, 2: 0.10, 3: 0.02, 4: 0.04, 5: 0.35, 6: 0.08, 7: 0.01},
	(4, 1): {1: 0.05, 2: 0.10, 3: 0.03, 4: 0.20, 5: 0.45, 6: 0.15, 7: 0.02},
	(1, 4): {1: 0.25, 2: 0.15, 3: 0.03, 4: 0.05, 5: 0.40, 6: 0.10, 7: 0.02},
	(4, 5): {1: 0.60, 2: 0.05, 3: 0.01, 4: 0.10, 5: 0.03, 6: 0.20, 7: 0.01},
	(2, 5): {1: 0.55, 2: 0.06, 3: 0.02, 4: 0.12, 5: 0.04, 6: 0.20, 7: 0.01},  # ii-V-I
	(6, 2): {1: 0.12, 2: 0.03, 3: 0.01, 4: 0.25, 5: 0.50, 6: 0.08, 7: 0.01},
	(3, 6): {1: 0.08, 2: 0.40, 3: 0.01, 4: 0.35, 5: 0.12, 6: 0.03, 7: 0.01},
	(1, 6): {1: 0.08, 2: 0.25, 3: 0.02, 4: 0.45, 5: 0.15, 6: 0.04, 7: 0.01},
}

# Jitter ceilings for creative selection.
CREATIVITY_JITTER = 0.5
TENSION_MATCH_STRENGTH = 2.0

# iii and vii° are the least common diatonic chords; creativity favours them.
COLOUR_DEGREES: typing.FrozenSet[int] = frozenset({3, 7})


def ordered_weights (table: typing.Mapping[int, float]) -> DegreeWeights:

	"""Return a table row as ``(degree, weight)`` pairs in ascending degree order."""

	return [(degree, float(table[degree])) for degree in sorted(table)]


def weighted_select (options: DegreeWeights, rng: random.Random) -> int:

	"""Choose a degree from ordered ``(degree, weight)`` pairs.

	Draws ``u`` uniformly from ``[0, total)`` and walks the pairs in the order
	given, subtracting each weight until ``u`` drops to zero or below.

	An empty list or a zero total falls back to the tonic (degree 1) instead
	of raising, so a fully suppressed row still yields a playable chord.

	Example:
		```python
		weighted_select([(1, 0.5), (5, 0.5)], random.Random(3))
		```
	"""

	total_weight = sum(weight for _, weight in options)

	if total_weight <= 0:
		logger.debug("Weighted selection over an empty distribution, falling back to the tonic")
		return TONIC

	roll = rng.uniform(0, total_weight)

	last_positive = TONIC

	for degree, weight in options:

		if weight <= 0:
			# Decision path: zero-weight degrees can never be chosen.
			continue

		last_positive = degree
		roll -= weight
		if roll <= 0:
			return degree

	# Floating-point residue: the roll landed past the last positive weight.
	return last_positive


def transition_weights (previous: typing.Optional[int], previous2: typing.Optional[int] = None) -> DegreeWeights:

	"""Return the base transition row for the generator.

	The second-order row for ``(previous2, previous)`` wins when it exists,
	otherwise the first-order row for ``previous`` is used. With no previous
	chord the opening weights apply.
	"""

	if previous is None:
		return ordered_weights(OPENING_WEIGHTS)

	if previous2 is not None and (previous2, previous) in SECOND_ORDER:
		return ordered_weights(SECOND_ORDER[(previous2, previous)])

	return ordered_weights(FIRST_ORDER.get(previous, {}))


def apply_tension_match (options: DegreeWeights, target_tension: float) -> DegreeWeights:

	"""Boost degrees whose static tension is close to ``target_tension``.

	Each weight is multiplied by ``1 + (1 - |target - tension|) * 2``, so an
	exact match triples the weight and the worst match leaves it nearly as is.
	"""

	adjusted: DegreeWeights = []

	for degree, weight in options:
		match = 1.0 - abs(target_tension - chordsmith.tension.degree_tension(degree))
		adjusted.append((degree, weight * (1.0 + match * TENSION_MATCH_STRENGTH)))

	return adjusted


def apply_creativity (options: DegreeWeights, creativity: float, rng: random.Random) -> DegreeWeights:

	"""Randomly boost weights, favouring iii and vii° as creativity rises.

	A creativity of 0 returns the weights untouched and draws nothing from
	``rng``.
	"""

	if creativity <= 0:
		return list(options)

	adjusted: DegreeWeights = []

	for degree, weight in options:
		weight *= 1.0 + rng.uniform(0, creativity * CREATIVITY_JITTER)

		if degree in COLOUR_DEGREES:
			weight *= 1.0 + creativity

		adjusted.append((degree, weight))

	return adjusted


class ProgressionChain:

	"""
	A second-order chain over scale degrees, steered by a target tension.
	"""

	def __init__ (self, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Initialize an empty chain. ``rng`` defaults to an unseeded ``random.Random``.
		"""

		self.rng = rng or random.Random()
		self.previous: typing.Optional[int] = None
		self.previous2: typing.Optional[int] = None


	def weights (self, target_tension: float, creativity: float) -> DegreeWeights:

		"""Return the reweighted candidate row for the next chord."""

		options = transition_weights(self.previous, self.previous2)
		options = apply_tension_match(options, target_tension)

		return apply_creativity(options, creativity, self.rng)


	def step (self, target_tension: float, creativity: float = 0.0) -> int:

		"""
		Choose the next degree, record it, and return it.
		"""

		degree = weighted_select(self.weights(target_tension, creativity), self.rng)

		self.previous2 = self.previous
		self.previous = degree

		return degree


	def reset (self) -> None:

		"""Forget the chord history so the next step uses the opening weights."""

		self.previous = None
		self.previous2 = None
