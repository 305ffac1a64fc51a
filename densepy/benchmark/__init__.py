"""Benchmark scripts.

Requires the optional ``pyperf`` dependency (``pip install densepy[bench]``).
"""
