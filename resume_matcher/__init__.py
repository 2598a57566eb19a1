"""Resume Matcher: work-history to job-posting skill matching."""

__version__ = "0.1.0"
