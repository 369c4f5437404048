"""
Pydantic schemas.

Wire contracts for the remote job service and API request/response models.
"""
