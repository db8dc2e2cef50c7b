"""
Domain layer - Core business entities and domain errors.

Skills, users, matches, sessions and credit transactions, independent
of how they are stored or presented.
"""
