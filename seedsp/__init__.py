"""Sample-by-sample audio building blocks: envelopes, dynamics, effects and a stereo reverb."""

__version__ = "0.1.0"