class OutOfGamutWarning(UserWarning):
    """An integer RGB result fell outside [0, 255]; the value is returned unclamped."""
