"""
Core helpers.

Pure transformations grouped by topic: arrays, numbers, text, dates,
JSON, objects, errors and timing.
"""
