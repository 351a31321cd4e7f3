"""Data files bundled with lessonrender."""
