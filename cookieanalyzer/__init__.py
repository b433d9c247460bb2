# Cookie Analyzer

"""
Finds the most active cookie(s) in a cookie log for a given date.

A cookie log is a header line followed by `cookie,timestamp` rows.
The "most active" cookies are those seen most often on that date;
every cookie tied for first place is reported.
"""

__version__ = "0.1.0"
