class CinemaBrowserError(Exception):
    """Base exception for all cinema_browser errors"""
    pass


class SpecError(CinemaBrowserError):
    """
    The database JSON document could not be fetched or parsed
    into the expected top-level shape
    """
    pass
