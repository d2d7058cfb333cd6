"""Batch generation of full chord progressions.

:func:`generate_progression` turns a :class:`~chordsmith.config.GenerationConfig`
into a list of :class:`GenerativeSlot` records, one per timeline position.
The pipeline runs in a fixed order:

1. A tension curve and a density map are computed up front.
2. Slots are filled left to right. Rests leave the chord history alone;
   chord slots draw a degree from a second-order chain that favours
   degrees whose tension matches the curve, then derive velocity, duration,
   swing and stagger from the slot's position and the rhythmic style.
3. A cadence pass may resolve the final chord to the tonic.

Each chord depends on the two before it, so the fill loop is strictly
sequential.

Pass a seeded ``random.Random`` for repeatable output:

    ```python
    import random
    import chordsmith.generator

    slots = chordsmith.generator.generate_progression(
        chordsmith.config.GenerationConfig(density=1.0, creativity=0.0),
        rng=random.Random(7),
    )
    ```
"""

import dataclasses
import logging
import random
import typing

import chordsmith.chords
import chordsmith.config
import chordsmith.intervals
import chordsmith.markov_chain
import chordsmith.phrase_structure
import chordsmith.sequence_utils
import chordsmith.tension
import chordsmith.tension_curves


logger = logging.getLogger(__name__)


VELOCITY_DOWNBEAT = 0.85
VELOCITY_OFFBEAT = 0.75
VELOCITY_OTHER = 0.70
VELOCITY_TENSION_BOOST = 0.15
VELOCITY_JITTER = 0.05
VELOCITY_MIN = 0.5
VELOCITY_MAX = 1.0

SUSTAIN_PROBABILITY = 0.5
SYNCOPATED_SWING = 0.15
RANDOM_SWING = 0.1

CADENCE_PROBABILITY = 0.6
CADENCE_DEGREES: typing.FrozenSet[int] = frozenset({1, 5})

STAGGER: typing.Dict[chordsmith.config.RhythmicStyle, float] = {
	chordsmith.config.RhythmicStyle.STEADY: 0.3,
	chordsmith.config.RhythmicStyle.SYNCOPATED: 0.6,
	chordsmith.config.RhythmicStyle.EUCLIDEAN: 0.6,
	chordsmith.config.RhythmicStyle.SPARSE: 0.4,
}
DEFAULT_STAGGER = 0.5
RANDOM_STAGGER_RANGE = (0.2, 0.8)


@dataclasses.dataclass(frozen=True)
class GenerativeSlot:

	"""
	One timeline position of a generated progression.

	Attributes:
		position: Slot index, starting at 0.
		degree: Scale degree 1-7, or ``None`` for a rest.
		velocity: Strike strength 0.0-1.0 (0 for rests).
		duration: Length in slots (1 or 2).
		tension: The chord's static tension, or the curve target for rests.
		swing: Timing offset in slot units, -1.0 to 1.0.
		stagger: Arpeggiation spread of the chord's notes, 0.0-1.0.
		phrase: Phrase id from the configured phrase structure.
	"""

	position: int
	degree: typing.Optional[int]
	velocity: float
	duration: int
	tension: float
	swing: float
	stagger: float
	phrase: int = 0

	@property
	def is_rest (self) -> bool:

		"""Return True if this slot holds no chord."""

		return self.degree is None


def _velocity (position: int, target_tension: float, rng: random.Random) -> float:

	"""Accent downbeats, then off-beats, lifted by the target tension."""

	if position % 4 == 0:
		base = VELOCITY_DOWNBEAT
	elif position % 2 == 1:
		base = VELOCITY_OFFBEAT
	else:
		base = VELOCITY_OTHER

	velocity = base + target_tension * VELOCITY_TENSION_BOOST + rng.uniform(-VELOCITY_JITTER, VELOCITY_JITTER)

	return max(VELOCITY_MIN, min(VELOCITY_MAX, velocity))


def _swing (position: int, style: chordsmith.config.RhythmicStyle, rng: random.Random) -> float:

	if style == chordsmith.config.RhythmicStyle.SYNCOPATED:
		return SYNCOPATED_SWING if position % 2 == 1 else 0.0

	if style == chordsmith.config.RhythmicStyle.RANDOM:
		return rng.uniform(-RANDOM_SWING, RANDOM_SWING)

	return 0.0


def _stagger (style: chordsmith.config.RhythmicStyle, rng: random.Random) -> float:

	if style == chordsmith.config.RhythmicStyle.RANDOM:
		return rng.uniform(*RANDOM_STAGGER_RANGE)

	return STAGGER.get(style, DEFAULT_STAGGER)


def _resolve_cadence (slots: typing.List[GenerativeSlot], rng: random.Random) -> None:

	"""Possibly move the last chord to the tonic, in place.

	Only a final chord that is neither I nor V is considered, and it is
	replaced with probability ``CADENCE_PROBABILITY``.
	"""

	for index in range(len(slots) - 1, -1, -1):

		slot = slots[index]

		if slot.degree is None:
			continue

		if slot.degree in CADENCE_DEGREES:
			return

		if rng.random() < CADENCE_PROBABILITY:
			slots[index] = dataclasses.replace(slot, degree=1, tension=chordsmith.tension.degree_tension(1))
			logger.debug(f"Resolved final chord at slot {index} to the tonic")

		return


def generate_progression (
	config: typing.Optional[chordsmith.config.GenerationConfig] = None,
	rng: typing.Optional[random.Random] = None,
	key: str = "C"
) -> typing.List[GenerativeSlot]:

	"""Generate a full progression from style parameters.

	Parameters:
		config: Style controls; defaults to ``GenerationConfig()``.
		rng: Random number generator instance. Seed it for repeatable output.
		key: Key name, used only when logging chord names. Slots carry scale
			degrees, so the same progression can be played in any key.

	Raises:
		ValueError: If ``key`` is not a note name.

	Returns:
		One :class:`GenerativeSlot` per configured slot, in order.

	Example:
		```python
		config = chordsmith.presets.preset_config("Pop Hit")
		for slot in generate_progression(config, random.Random(1)):
			print(slot.position, slot.degree)
		```
	"""

	chordsmith.intervals.key_name_to_pc(key)

	config = config or chordsmith.config.GenerationConfig()
	rng = rng or random.Random()

	tension_curve = chordsmith.tension_curves.generate_tension_curve(config.slots, config.tension_curve, rng)
	density_map = chordsmith.sequence_utils.generate_density_map(config.slots, config.density, config.rhythmic_style, rng)
	phrase_map = chordsmith.phrase_structure.generate_phrase_structure(config.phrase_structure, config.slots)

	logger.debug(f"Tension curve: {[round(t, 2) for t in tension_curve]}")
	logger.debug(f"Chord slots: {chordsmith.sequence_utils.sequence_to_indices(density_map)}")
	logger.debug(f"Phrase map: {phrase_map}")

	chain = chordsmith.markov_chain.ProgressionChain(rng)
	style = config.rhythmic_style
	result: typing.List[GenerativeSlot] = []

	for i in range(config.slots):

		target_tension = tension_curve[i]

		if not density_map[i]:
			result.append(GenerativeSlot(
				position = i,
				degree = None,
				velocity = 0.0,
				duration = 1,
				tension = target_tension,
				swing = 0.0,
				stagger = 0.0,
				phrase = phrase_map[i]
			))
			continue

		degree = chain.step(target_tension, config.creativity)
		velocity = _velocity(i, target_tension, rng)

		duration = 1
		if i < config.slots - 1 and not density_map[i + 1] and rng.random() < SUSTAIN_PROBABILITY:
			# Decision path: let the chord ring into the following rest.
			duration = 2

		result.append(GenerativeSlot(
			position = i,
			degree = degree,
			velocity = velocity,
			duration = duration,
			tension = chordsmith.tension.degree_tension(degree),
			swing = _swing(i, style, rng),
			stagger = _stagger(style, rng),
			phrase = phrase_map[i]
		))

	_resolve_cadence(result, rng)

	logger.info(f"Generated progression in {key}: {format_degrees(result)}")

	return result


def format_degrees (slots: typing.Sequence[GenerativeSlot]) -> str:

	"""Return a compact degree string such as ``"1 . 5 . 6 . 4 ."``."""

	return " ".join("." if slot.degree is None else str(slot.degree) for slot in slots)


def progression_chord_names (slots: typing.Sequence[GenerativeSlot], key: str) -> typing.List[typing.Optional[str]]:

	"""Return the chord name of each slot in ``key`` (``None`` for rests).

	Example:
		```python
		progression_chord_names(slots, "G")  # ["G Major", None, "D Major", ...]
		```
	"""

	return [
		None if slot.degree is None else chordsmith.chords.chord_name(key, slot.degree)
		for slot in slots
	]
