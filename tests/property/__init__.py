"""
Property-based testing suite for theory-kit.

Uses Hypothesis to vary seeds, ranges and values while checking the
invariants of the stream, the runner and the standard shrinkers.
"""
