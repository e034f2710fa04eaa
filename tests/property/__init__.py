"""
THEOLOGOS - Property-Based Testing Suite

Property-based testing using Hypothesis to discover edge cases and invariants
in citation parsing, detection, machine-code conversion and proof grouping.
"""
