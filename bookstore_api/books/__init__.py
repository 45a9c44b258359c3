"""
Books: list, show, create and delete.
"""
