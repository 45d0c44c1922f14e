"""fitness-coach: AI-powered workout and diet plan generator."""

__version__ = "0.1.0"
