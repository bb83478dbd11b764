"""resume-fit: resume vs job description matching with heuristic fallback."""

__version__ = "0.1.0"
