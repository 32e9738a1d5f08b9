class InvalidDatasetError(ValueError):
    """The dataset has no record collection that can be read as a list."""
