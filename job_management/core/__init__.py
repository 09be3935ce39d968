"""
Core decision logic: credential checks, vault allow-list and job state policy.

Pure functions with no I/O; the boundary layer performs all external calls.
"""
