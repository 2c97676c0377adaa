"""
This module provides the normalization engine for stealer logs.
Each stealer family's system information layout is a data table run by a shared
engine; a signature detector picks the layout and a separate grammar splits
browser password dumps into credentials.
"""
