"""
Face Attendance - Webcam Attendance by Face Recognition

Recognizes known faces from a camera feed and records one attendance entry
per person per day in an append-only ledger file.
"""

__version__ = "1.0.0"
__author__ = "Face Attendance Team"
