"""
Property-based testing suite for propgen.

Uses Hypothesis to drive seeds, bounds and sizes into the generator engine
and verify its laws and invariants.
"""
