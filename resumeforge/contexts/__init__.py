"""Bounded contexts of ResumeForge."""
