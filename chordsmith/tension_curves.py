"""Tension curves for shaping a progression.

A tension curve gives a target value in [0, 1] for every slot of a
progression. The batch generator favours chords whose static tension is
close to the target, so the curve steers where the music builds and where
it settles.

Available curves:

    "arc"      0 → 1 → 0, a classical rise and fall (half sine).
    "wave"     A full sine cycle scaled to [0, 1], two turning points.
    "buildup"  Linear rise from 0 to 1.
    "release"  Linear fall from 1 to 0.
    "random"   Smooth sine undulation plus ±0.15 noise, clamped to [0, 1].
    "flat"     Constant 0.5.

A single-slot progression has no shape to draw, so every curve returns
``[0.5]`` for ``length == 1``.
"""

import math
import random
import typing

import chordsmith.config


NEUTRAL_TENSION = 0.5
RANDOM_NOISE = 0.15


# ─── Curve functions ──────────────────────────────────────────────────────────
# Each maps (index, length, rng) to a value; callers guarantee length > 1.


def arc (i: int, length: int, rng: random.Random) -> float:
    """Half sine: 0 at both ends, 1 in the middle."""
    return math.sin(math.pi * i / (length - 1))


def wave (i: int, length: int, rng: random.Random) -> float:
    """Full sine cycle shifted into [0, 1]."""
    return (math.sin(2 * math.pi * i / (length - 1)) + 1) / 2


def buildup (i: int, length: int, rng: random.Random) -> float:
    """Linear crescendo from 0 to 1."""
    return i / (length - 1)


def release (i: int, length: int, rng: random.Random) -> float:
    """Linear diminuendo from 1 to 0."""
    return 1 - i / (length - 1)


def random_curve (i: int, length: int, rng: random.Random) -> float:
    """Slow sine undulation with uniform noise, clamped to [0, 1]."""
    base = (math.sin(3 * math.pi * i / length) + 1) / 2
    noise = rng.uniform(-RANDOM_NOISE, RANDOM_NOISE)
    return max(0.0, min(1.0, base + noise))


def flat (i: int, length: int, rng: random.Random) -> float:
    """Constant neutral tension."""
    return NEUTRAL_TENSION


# ─── Registry and lookup ──────────────────────────────────────────────────────

CurveFn = typing.Callable[[int, int, random.Random], float]

CURVE_FUNCTIONS: typing.Dict[chordsmith.config.TensionCurve, CurveFn] = {
    chordsmith.config.TensionCurve.ARC:     arc,
    chordsmith.config.TensionCurve.WAVE:    wave,
    chordsmith.config.TensionCurve.BUILDUP: buildup,
    chordsmith.config.TensionCurve.RELEASE: release,
    chordsmith.config.TensionCurve.RANDOM:  random_curve,
    chordsmith.config.TensionCurve.FLAT:    flat,
}


def generate_tension_curve (
    length: int,
    curve: typing.Union[chordsmith.config.TensionCurve, str],
    rng: typing.Optional[random.Random] = None
) -> typing.List[float]:
    """Return ``length`` target tension values for the named curve.

    Unrecognised names produce a flat 0.5 curve (with a logged warning)
    rather than raising.

    Example:
        ```python
        generate_tension_curve(5, "buildup")  # [0.0, 0.25, 0.5, 0.75, 1.0]
        generate_tension_curve(1, "arc")      # [0.5]
        ```
    """
    if length <= 0:
        return []

    if length == 1:
        return [NEUTRAL_TENSION]

    fn = CURVE_FUNCTIONS[chordsmith.config.parse_tension_curve(curve)]
    rng = rng or random.Random()

    return [fn(i, length, rng) for i in range(length)]
