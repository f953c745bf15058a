"""Geo Attendance package.

Location-integrity checks for attendance check-in, organized by feature
modules (location, geofence) with a thin Flask controller layer over
stateless services.
"""
