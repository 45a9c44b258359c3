"""
Users: registration of a name and an email address.
"""
