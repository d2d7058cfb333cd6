import math
import random
import typing

import chordsmith.config
import chordsmith.exceptions


# Off-beat positions for syncopated placement, in fill order.
SYNCOPATED_OFFSETS: typing.Tuple[int, ...] = (1, 3, 6, 9, 11, 13)

# Downbeats for sparse placement, in fill order.
SPARSE_OFFSETS: typing.Tuple[int, ...] = (0, 4, 8, 12)


def euclidean (steps: int, pulses: int) -> typing.List[bool]:

	"""Distribute ``pulses`` onsets as evenly as possible over ``steps``.

	Uses the bucket formulation: step ``i`` falls in bucket
	``floor(i * pulses / steps)`` and is an onset when its bucket differs from
	the previous step's. The first step is always an onset when
	``pulses > 0``.

	``pulses >= steps`` fills every step; ``pulses <= 0`` leaves all empty.

	Example:
		```python
		euclidean(8, 3)  # [T, F, F, T, F, F, T, F]
		```
	"""

	if steps <= 0:
		return []

	if pulses >= steps:
		return [True] * steps

	if pulses <= 0:
		return [False] * steps

	buckets = [(i * pulses) // steps for i in range(steps)]
	pattern: typing.List[bool] = []
	previous = -1

	for bucket in buckets:
		pattern.append(bucket != previous)
		previous = bucket

	return pattern


def template_sequence (length: int, offsets: typing.Sequence[int], pulses: int) -> typing.List[bool]:

	"""Fill the first ``pulses`` template offsets that fit inside ``length``."""

	sequence = [False] * length

	for offset in offsets[:min(pulses, len(offsets))]:
		if offset < length:
			sequence[offset] = True

	return sequence


def sequence_to_indices (sequence: typing.Sequence[bool]) -> typing.List[int]:

	"""Extract step indices where hits occur in a boolean sequence."""

	return [i for i, v in enumerate(sequence) if v]


def pulse_count (length: int, density: float) -> int:

	"""Return the number of onsets for a density, at least one.

	Halves round up (``0.5`` → ``1``) so that a density of 0.5 over an odd
	length tips toward the denser pattern.
	"""

	return max(1, math.floor(length * density + 0.5))


def generate_density_map (
	length: int,
	density: float,
	style: typing.Union[chordsmith.config.RhythmicStyle, str],
	rng: typing.Optional[random.Random] = None
) -> typing.List[bool]:

	"""Decide which slots carry a chord and which are rests.

	Parameters:
		length: Number of slots
		density: Target share of chord slots (0.0 to 1.0)
		style: Placement style. ``steady`` and ``euclidean`` spread onsets
			evenly, ``syncopated`` fills off-beats, ``sparse`` fills
			downbeats, and ``random`` flips an independent coin per slot
			with probability ``density``.
		rng: Random number generator instance (only ``random`` draws from it)

	Raises:
		UnknownEnumError: If ``style`` is not a rhythmic style.

	Example:
		```python
		generate_density_map(16, 0.25, "sparse")
		# chords on slots 0, 4, 8 and 12
		```
	"""

	resolved = chordsmith.config.parse_rhythmic_style(style)
	pulses = pulse_count(length, density)

	if resolved in (chordsmith.config.RhythmicStyle.STEADY, chordsmith.config.RhythmicStyle.EUCLIDEAN):
		return euclidean(length, pulses)

	if resolved == chordsmith.config.RhythmicStyle.SYNCOPATED:
		return template_sequence(length, SYNCOPATED_OFFSETS, pulses)

	if resolved == chordsmith.config.RhythmicStyle.SPARSE:
		return template_sequence(length, SPARSE_OFFSETS, pulses)

	if resolved == chordsmith.config.RhythmicStyle.RANDOM:
		rng = rng or random.Random()
		return [rng.random() < density for _ in range(length)]

	raise chordsmith.exceptions.UnknownEnumError("rhythmic style", style, [s.value for s in chordsmith.config.RhythmicStyle])
