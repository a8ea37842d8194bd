"""Mentora: AI lecturer personas, storytelling, and study groups."""
