"""Named generation presets and artist-style mappings.

A preset is a partial config. :func:`preset_config` shallow-merges it over
``DEFAULT_CONFIG`` and then applies any keyword overrides, so presets only
need to name what makes them different.

Example:
	```python
	config = preset_config("Jazz Exploration", slots=32)
	config, preset_name, description = artist_config("Jinsang")
	```
"""

import dataclasses
import typing

import chordsmith.config


DEFAULT_CONFIG: typing.Dict[str, typing.Any] = {
	"slots": 16,
	"density": 0.5,
	"tension_curve": "arc",
	"rhythmic_style": "steady",
	"phrase_structure": "ABAB",
	"creativity": 0.5,
}


GENERATIVE_PRESETS: typing.Dict[str, typing.Dict[str, typing.Any]] = {
	"Pop Hit": {
		"density": 0.5,
		"tension_curve": "arc",
		"rhythmic_style": "steady",
		"phrase_structure": "ABAB",
		"creativity": 0.2,
	},
	"Ambient Chill": {
		"density": 0.3,
		"tension_curve": "wave",
		"rhythmic_style": "sparse",
		"phrase_structure": "through-composed",
		"creativity": 0.5,
	},
	"Energetic EDM": {
		"density": 0.75,
		"tension_curve": "buildup",
		"rhythmic_style": "syncopated",
		"phrase_structure": "AABA",
		"creativity": 0.4,
	},
	"Jazz Exploration": {
		"density": 0.6,
		"tension_curve": "random",
		"rhythmic_style": "syncopated",
		"phrase_structure": "question-answer",
		"creativity": 0.8,
	},
	"Minimalist": {
		"density": 0.25,
		"tension_curve": "release",
		"rhythmic_style": "euclidean",
		"phrase_structure": "ABAC",
		"creativity": 0.3,
	},
	"Epic Buildup": {
		"density": 0.6,
		"tension_curve": "buildup",
		"rhythmic_style": "steady",
		"phrase_structure": "through-composed",
		"creativity": 0.3,
	},
	"Completely Random": {
		"density": 0.5,
		"tension_curve": "random",
		"rhythmic_style": "random",
		"phrase_structure": "through-composed",
		"creativity": 1.0,
	},
}


@dataclasses.dataclass(frozen=True)
class ArtistMapping:

	"""An artist style expressed as a base preset plus overrides."""

	preset: str
	description: str
	overrides: typing.Dict[str, typing.Any] = dataclasses.field(default_factory=dict)


ARTIST_MAPPINGS: typing.Dict[str, ArtistMapping] = {
	"oneheart": ArtistMapping(
		preset = "Ambient Chill",
		description = "Melancholic ambient progression with sparse, emotional chords",
		overrides = {"density": 0.3, "tension_curve": "wave", "rhythmic_style": "sparse", "phrase_structure": "through-composed", "creativity": 0.6},
	),
	"Skeler": ArtistMapping(
		preset = "Energetic EDM",
		description = "Dark synthwave progression with energetic buildup",
		overrides = {"density": 0.65, "tension_curve": "buildup", "rhythmic_style": "syncopated", "phrase_structure": "AABA", "creativity": 0.4},
	),
	"Eevee": ArtistMapping(
		preset = "Ambient Chill",
		description = "Dreamy lofi progression with gentle waves",
		overrides = {"density": 0.4, "tension_curve": "wave", "rhythmic_style": "sparse", "phrase_structure": "ABAB", "creativity": 0.5},
	),
	"Jinsang": ArtistMapping(
		preset = "Jazz Exploration",
		description = "Smooth jazz-influenced lofi with sophisticated harmony",
		overrides = {"density": 0.5, "tension_curve": "arc", "rhythmic_style": "syncopated", "phrase_structure": "question-answer", "creativity": 0.7},
	),
	"Saib": ArtistMapping(
		preset = "Jazz Exploration",
		description = "Jazzy chillhop with creative chord choices",
		overrides = {"density": 0.55, "tension_curve": "wave", "rhythmic_style": "syncopated", "phrase_structure": "ABAC", "creativity": 0.75},
	),
	"Deadcrow": ArtistMapping(
		preset = "Energetic EDM",
		description = "Dark wave/phonk progression with aggressive energy",
		overrides = {"density": 0.7, "tension_curve": "buildup", "rhythmic_style": "syncopated", "phrase_structure": "through-composed", "creativity": 0.5},
	),
	"Idealism": ArtistMapping(
		preset = "Minimalist",
		description = "Minimalist ambient with spacious arrangement",
		overrides = {"density": 0.25, "tension_curve": "release", "rhythmic_style": "sparse", "phrase_structure": "ABAC", "creativity": 0.4},
	),
	"Sleepy Fish": ArtistMapping(
		preset = "Ambient Chill",
		description = "Dreamy chillhop with ambient textures",
		overrides = {"density": 0.35, "tension_curve": "wave", "rhythmic_style": "sparse", "phrase_structure": "through-composed", "creativity": 0.5},
	),
	"In Love With A Ghost": ArtistMapping(
		preset = "Pop Hit",
		description = "Upbeat chillwave with catchy chord progressions",
		overrides = {"density": 0.6, "tension_curve": "arc", "rhythmic_style": "steady", "phrase_structure": "ABAB", "creativity": 0.3},
	),
}


def merge_config (*fragments: typing.Mapping[str, typing.Any]) -> chordsmith.config.GenerationConfig:

	"""Shallow-merge config fragments over ``DEFAULT_CONFIG``, later fragments winning."""

	merged: typing.Dict[str, typing.Any] = dict(DEFAULT_CONFIG)

	for fragment in fragments:
		merged.update(fragment)

	return chordsmith.config.GenerationConfig.from_dict(merged)


def preset_config (name: str, **overrides: typing.Any) -> chordsmith.config.GenerationConfig:

	"""Return the config for a named preset, with optional overrides.

	Raises:
		ValueError: If the preset name is unknown.
	"""

	if name not in GENERATIVE_PRESETS:
		known = ", ".join(sorted(GENERATIVE_PRESETS))
		raise ValueError(f"Unknown preset '{name}'. Known presets: {known}")

	return merge_config(GENERATIVE_PRESETS[name], overrides)


def artist_config (name: str) -> typing.Tuple[chordsmith.config.GenerationConfig, str, str]:

	"""Return ``(config, preset name, description)`` for an artist style.

	The artist's overrides are merged over the defaults, not over the named
	preset: the preset name is a label for hosts.

	Raises:
		ValueError: If the artist name is unknown.
	"""

	if name not in ARTIST_MAPPINGS:
		known = ", ".join(sorted(ARTIST_MAPPINGS))
		raise ValueError(f"Unknown artist '{name}'. Known artists: {known}")

	mapping = ARTIST_MAPPINGS[name]

	return merge_config(mapping.overrides), mapping.preset, mapping.description
