"""
Boundary layer: adapters for the job database, the vault management
service and the EMR Serverless execution backend.
"""
