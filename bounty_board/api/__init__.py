"""
Validation report models.
"""
