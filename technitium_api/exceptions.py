#
#
#


class TechnitiumClientException(Exception):
    pass


class TechnitiumTransportError(TechnitiumClientException):
    '''The server could not be reached: connection refused, DNS failure,
    TLS handshake failure, or a timeout.'''

    pass


class TechnitiumTimeout(TechnitiumTransportError):
    def __init__(self, msg='Request timed out'):
        super().__init__(msg)


class TechnitiumDecodeError(TechnitiumClientException):
    '''The response body is not JSON or does not have the expected shape.'''

    pass


class TechnitiumApiError(TechnitiumClientException):
    '''The server answered with status=error.'''

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class TechnitiumHttpError(TechnitiumApiError):
    def __init__(self, status_code):
        super().__init__(f'HTTP {status_code}')
        self.status_code = status_code


class TechnitiumInvalidToken(TechnitiumClientException):
    def __init__(self):
        super().__init__('Session expired. Please login again.')
