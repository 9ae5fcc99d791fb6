"""Applicant tracking system REST API."""
