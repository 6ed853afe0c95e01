"""
ghstache.parsing – Template scanner and tag classification.
"""
