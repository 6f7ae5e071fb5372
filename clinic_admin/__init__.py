"""
Clinic Admin API

FastAPI backend for the clinic booking admin panel: doctor registration,
admin authentication, appointment listing and cancellation, and dashboard
statistics.
"""

__version__ = "1.0.0"
