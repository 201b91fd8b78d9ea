class LinkError(Exception):
    """Base for failures the link service reports to clients."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LinkError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(LinkError):
    status_code = 409
    default_message = "Code already in use"


class NotFoundError(LinkError):
    status_code = 404
    default_message = "Short URL not found"


class ExhaustedError(LinkError):
    status_code = 500
    default_message = "Unable to generate unique code"
