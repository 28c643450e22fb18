"""InnerTube response parsers, one module per content type.

Each module turns raw response trees into the records of ytmkit.models.
"""
