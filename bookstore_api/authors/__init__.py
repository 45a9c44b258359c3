"""
Authors: list, show, create, delete and seed.
"""
