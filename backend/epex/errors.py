"""Error taxonomy shared by every HTTP handler.

Each error knows its HTTP status and renders the `{success, message}`
envelope; `create_app` registers the handler that turns them into
responses.
"""


class ApiError(Exception):
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'success': False, 'message': self.message}


class InvalidInput(ApiError):
    status_code = 400
    message = 'Invalid input'


class InvalidAmount(InvalidInput):
    message = 'Invalid amount. Minimum amount is ₹1 (100 paise)'


class DuplicateEmail(ApiError):
    status_code = 400
    message = 'User with this email already exists'


class InvalidCredentials(ApiError):
    status_code = 401
    message = 'Invalid email or password'

    def __init__(self):
        # Always the same text, whichever field was wrong
        super().__init__()


class Unauthorized(ApiError):
    status_code = 401
    message = 'Unauthorized'

    def __init__(self):
        super().__init__()


class InvalidToken(ApiError):
    status_code = 401
    message = 'Invalid token'


class NotFound(ApiError):
    status_code = 404
    message = 'Not found'


class InvalidSignature(ApiError):
    status_code = 400
    message = 'Invalid payment signature'


class ConfigurationError(ApiError):
    status_code = 500
    message = 'Server is not configured'


class UpstreamFailure(ApiError):
    status_code = 500
    message = 'Payment gateway request failed'
