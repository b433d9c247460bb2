# Ingestion package for the Cookie Analyzer
"""
Cookie log ingestion.

Turns `cookie,timestamp` lines into CookieRecords. Lines that cannot
be parsed are skipped and recorded as Rejections.
"""
