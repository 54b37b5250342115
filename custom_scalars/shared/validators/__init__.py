"""Shared validators package for the scalar definitions.

This package contains the single-constraint checks that scalar pipelines
are assembled from.

Available validators:
- checks.py: kind, length, alphabet and regex checks
- password.py: password complexity rules
- exceptions.py: the validation error taxonomy
"""
