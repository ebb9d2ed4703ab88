"""
Shared utilities for ResumeForge.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Customization event log (JSON Lines)
- Timestamps
"""

from resumeforge.utils.timestamp import now, now_exact

__all__ = ["now", "now_exact"]
