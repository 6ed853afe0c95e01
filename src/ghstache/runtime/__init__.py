"""
ghstache.runtime – Engine configuration and composition.
"""
