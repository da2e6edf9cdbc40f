# Custom exceptions to be used throughout the project.

class TimeValidationError(Exception):
    """
    To be raised when a time input cannot be converted to hours and minutes.
    May be raised under the following circumstances:
        1. Input matched neither the 12-hour 'h:mm AM' nor the 24-hour 'HH:mm' format
        2. Hours or minutes fell outside their valid ranges
    """
    # By default Exception class takes a tuple of arguments
    def __init__(self, *args):
        super().__init__(*args)


class ConfigurationError(Exception):
    """
    To be raised when the environment does not provide a usable configuration, e.g. a missing
    or malformed APP_URL in production.
    """
    def __init__(self, *args):
        super().__init__(*args)
