"""
Entity services: per-entity service factory and schema registry backed by a
document storage collaborator.
"""

__version__ = "0.1.0"
