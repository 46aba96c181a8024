"""
Core package: configuration, logging bootstrap and exceptions.
"""
