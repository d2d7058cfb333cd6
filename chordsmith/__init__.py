"""
Chordsmith - diatonic chord progressions for a chord-performance instrument.

Chordsmith thinks in Nashville numbers: every chord is a scale degree 1-7 of
a major key, and pitches are only worked out when a host asks for them. It
has two jobs:

- **Batch generation.** ``generate_progression()`` fills a timeline from a
  handful of style controls - density, tension curve, rhythmic style, phrase
  form and creativity. A second-order Markov chain picks each chord, steered
  toward a tension arc; Euclidean and template rhythms decide where chords
  fall and where the music rests; a cadence pass tends to bring the last
  chord home.
- **Live suggestion.** ``suggest_next_chords()`` reads what the performer
  just played and ranks the likely next chords, blending progression
  statistics with root-motion and functional-harmony rules, and explains
  each pick in plain words.

Everything is synchronous and free of I/O. Every random decision draws from
a ``random.Random`` you can pass in, so a seeded generator makes output
repeatable.

Minimal example:

    ```python
    import random
    import chordsmith

    config = chordsmith.preset_config("Pop Hit")
    slots = chordsmith.generate_progression(config, rng=random.Random(42))

    for slot in slots:
        if slot.degree is not None:
            print(slot.position, chordsmith.chord("C", slot.degree))
    ```

Package-level exports: ``GenerationConfig``, ``generate_progression``,
``preset_config``, ``chord``, ``chord_name``, ``apply_modification``,
``suggest_next_chords``, ``ChordHistory``.
"""

import chordsmith.chords
import chordsmith.config
import chordsmith.generator
import chordsmith.presets
import chordsmith.suggestion


GenerationConfig = chordsmith.config.GenerationConfig
generate_progression = chordsmith.generator.generate_progression
preset_config = chordsmith.presets.preset_config
chord = chordsmith.chords.chord
chord_name = chordsmith.chords.chord_name
apply_modification = chordsmith.chords.apply_modification
suggest_next_chords = chordsmith.suggestion.suggest_next_chords
ChordHistory = chordsmith.suggestion.ChordHistory
