"""Boundary layer: database persistence and the remote job service client."""
