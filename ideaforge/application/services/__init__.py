"""
Application services.

Exports:
  - IdeaCoordinator: idea-generation job lifecycle orchestration
"""

from ideaforge.application.services.idea_coordinator import IdeaCoordinator

__all__ = ["IdeaCoordinator"]
