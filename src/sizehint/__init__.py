"""
Size hint arithmetic for lazy sequences.

Overflow-safe combination of (lower, upper) bounds on the number of elements
a lazy sequence will produce, plus validated models and JSON contracts for
hints crossing a process boundary.
"""
