"""Utility helpers for lessonrender."""
