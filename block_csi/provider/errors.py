import block_csi.provider.messages as messages


class BaseProviderException(Exception):

    def __str__(self, *args, **kwargs):
        return self.message


class ProviderError(BaseProviderException):
    """
    A failed call to the storage provider.

    status_code is the HTTP status of the provider response, None when no response was received.
    """

    def __init__(self, method, url, status_code=None, details=""):
        super().__init__()
        self.method = method
        self.url = url
        self.status_code = status_code
        self.details = details
        if status_code is None:
            self.message = messages.PROVIDER_CONNECTION_ERROR_MESSAGE.format(method, url, details)
        else:
            self.message = messages.PROVIDER_REQUEST_ERROR_MESSAGE.format(method, url, status_code, details)


class MissingAccessTokenError(BaseProviderException):

    def __init__(self, variable_name):
        super().__init__()
        self.message = messages.MISSING_ACCESS_TOKEN_MESSAGE.format(variable_name)


class UnexpectedProviderResponseError(BaseProviderException):

    def __init__(self, url, body):
        super().__init__()
        self.message = messages.UNEXPECTED_PROVIDER_RESPONSE_MESSAGE.format(url, body)
