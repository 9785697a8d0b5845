class BiomartError(Exception):
    """
    Base class of all errors raised while talking to a BioMart server
    """


class NetworkError(BiomartError):
    """
    The request never got a response (connection refused, DNS failure, timeout, ...)
    """


class ServiceError(BiomartError, ValueError):
    """
    The server answered, but with a failing status code or an error message instead of data
    """

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(BiomartError):
    """
    The response body could not be decoded into the expected shape
    """
