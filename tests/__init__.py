"""
Test suite for the Clinic Admin API.

Contains unit and integration tests for the admin endpoints and services.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
