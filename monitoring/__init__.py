"""Monitoring application for the medical API simulator.

This package contains the patient, device and vital models, their
serializers and views, token authentication and the background vital
simulator.
"""
