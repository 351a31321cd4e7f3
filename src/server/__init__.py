"""HTTP API for lessonrender."""
