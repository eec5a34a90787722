"""
Canary Storage API

HTTP service storing metric set pair lists in per-account object storage.
"""

__version__ = "1.0.0"
