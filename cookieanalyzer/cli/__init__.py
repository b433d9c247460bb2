# CLI package for the Cookie Analyzer
"""
Command-line interface for the Cookie Analyzer.

    most-active-cookie -f <filename> -d <YYYY-MM-DD>
"""
