# ike/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output stays searchable per subsystem.
"""

CONFIG = "[CONFIG]"
SAMPLER = "[SAMPLER]"
SIMILARITY = "[SIMILARITY]"
EMBEDDING = "[EMBEDDING]"
QUERYOP = "[QUERYOP]"
CLI = "[CLI]"
