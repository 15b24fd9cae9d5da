"""
Core coordinate handling, errors, configuration and logging.
"""
