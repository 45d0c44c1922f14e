"""Input clients for collecting user profiles."""

from .questionnaire import ProfileQuestionnaire

__all__ = ["ProfileQuestionnaire"]
