# seedsp

Small audio processing blocks that work one sample at a time. Each block is
a plain Python object. You create it (usually with the sample rate), change
its settings, then call `process` once per sample. Only the standard library
is needed.

## Modules

| Module | Contents |
| --- | --- |
| `seedsp.adenv` | `AdEnv` attack/decay envelope, `AdEnvSegment` |
| `seedsp.adsr` | `Adsr` gate-driven envelope, `AdsrSegment` |
| `seedsp.line` | `Line` linear ramp |
| `seedsp.phasor` | `Phasor` 0-to-1 ramp oscillator |
| `seedsp.balance` | `Balance` level follower |
| `seedsp.compressor` | `Compressor` with sidechain and automatic makeup gain |
| `seedsp.crossfade` | `CrossFade`, `CrossfadeCurve` (`LIN`, `CPOW`, `LOG`, `EXP`) |
| `seedsp.limiter` | `Limiter` peak limiter for blocks |
| `seedsp.overdrive` | `Overdrive` soft-clipping distortion |
| `seedsp.autowah` | `Autowah` envelope-following wah |
| `seedsp.fold` | `Fold` sample-and-hold foldover |
| `seedsp.bitcrush` | `Bitcrush` bit depth and rate reduction |
| `seedsp.decimator` | `Decimator` downsampling and bit removal |
| `seedsp.reverbsc` | `ReverbSc` stereo reverb |
| `seedsp.metallic` | `SquareNoise`, `swing_vca`, `linear_vca` |
| `seedsp.shaping` | `soft_limit`, `soft_clip` |
| `seedsp.conversions` | `cube`, `s162f`, `f2s16`, `s242f`, `f2s24`, `s322f`, `f2s32`, `GpioPort`, `GpioPin` |

## Settings

Most settings are plain attributes or properties:

- `AdEnv`: `trigger()`, `set_time(segment, seconds)`, `set_curve`, `set_min`,
  `set_max`; read `value`, `current_segment`, `is_running`.
- `Adsr`: `process(gate)`, `set_time(segment, seconds)`, `set_sustain_level`;
  read `current_segment`, `is_running`.
- `Line`: `start(start, end, duration)`; `finished` turns true when the end
  value is reached.
- `Phasor(sample_rate, freq=1.0, initial_phase=0.0)`: `freq` can be read and
  set.
- `Compressor`: `ratio`, `threshold` (dB), `attack`, `release` (seconds),
  `makeup` (dB), `auto_makeup(enable)`; `gain` reports the current gain in dB.
  `process(sample, key=None)`, `apply(sample)`, `process_block(samples,
  key=None)` and `process_channels(channels, key)`, which raises `ValueError`
  if a channel is not as long as the key.
- `CrossFade(curve)`: `pos` from 0 (first input) to 1 (second), `curve`.
- `Limiter.process_block(samples, pre_gain)` returns a new list.
- `Overdrive`: `drive` from 0 to 1.
- `Autowah`: `wah`, `dry_wet` (0 to 100), `level`.
- `Fold`: `increment`. `Bitcrush`: `bit_depth`, `crush_rate`.
- `Decimator`: `downsample_factor`, `set_bitcrush_factor(factor)`,
  `set_bits_to_crush(bits)` (at most 16); negative values raise `ValueError`.
- `ReverbSc`: `feedback` (0 to 1), `lp_freq` (Hz). `process(left, right)`
  returns a `(left, right)` tuple. The constructor raises `ValueError` when
  the sample rate is so high that the delay lines would pass the size limit.

## Examples

An attack/decay envelope:

```python
from seedsp.adenv import AdEnv

env = AdEnv(48000)
env.trigger()
samples = [env.process() for _ in range(4800)]
```

Compressing a block of samples:

```python
from seedsp.compressor import Compressor

comp = Compressor(48000)
comp.threshold = -20.0
out = comp.process_block([0.5, -0.8, 0.9, 0.1])
```

Stereo reverb:

```python
from seedsp.reverbsc import ReverbSc

verb = ReverbSc(48000)
left, right = verb.process(1.0, 1.0)
```

## What it does not do

seedsp only computes samples. It does not read or write audio files, does not
talk to sound cards or other devices, and has no command-line tool. Complete
drum voices are not included, only the noise source, VCA shapes and
saturation curves listed above. `GpioPort` and `GpioPin` only describe pins;
nothing here drives hardware.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```