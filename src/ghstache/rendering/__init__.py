"""
ghstache.rendering – Tree walker, context stack and the engine facade.
"""
