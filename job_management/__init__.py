"""
Job Management API.

Status retrieval and cancellation for EMR Serverless query jobs,
authorized through the external vault management service.
"""

__version__ = "0.1.0"
