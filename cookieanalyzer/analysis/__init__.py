# Analysis package for the Cookie Analyzer
"""
Activity aggregation.

Counts cookie occurrences on a single date and reports the full set
of cookies tied for the highest count.
"""
