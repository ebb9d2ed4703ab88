"""
ResumeForge - resume builder backend

Users author resume content, pick a visual template and customize how it is
presented. This package holds the customization core.

Architecture:
- Customization Context: template configuration values, per-template defaults,
  spacing presets, undo/redo history, persistence and the controller that
  coordinates them
"""

__version__ = "0.1.0"
