"""Stealer logs normalization engine."""
