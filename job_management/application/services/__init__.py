"""
Application services.

Exports:
  - JobRequestHandler: GET/DELETE job request pipeline
"""

from job_management.application.services.job_request_handler import JobRequestHandler

__all__ = ["JobRequestHandler"]
