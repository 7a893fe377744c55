"""
Patient Records

An in-memory record keeper for patients and their appointments,
layered as entity models, a repository and a service facade.
"""

__version__ = "1.0.0"
