"""
Test suite for Patient Records.

Contains unit tests for the repository and service layers and an
end-to-end run of the demo scenario.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
