"""
Error taxonomy for the verification API.
Every error is terminal for the request and rendered as a JSON body by the
handler registered in create_app().
"""


class DanceVerifyError(Exception):
    status_code = 500
    title = "Internal Server Error"

    def __init__(self, message, **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self):
        body = {"error": self.title, "message": self.message}
        body.update(self.extra)
        return body


class PaymentRequired(DanceVerifyError):
    """No proof supplied. Carries the payment instructions for the caller."""

    status_code = 402
    title = "Payment Required"

    def __init__(self, message, requirements):
        super().__init__(message, payment=requirements)
        self.requirements = requirements


class PaymentInvalid(DanceVerifyError):
    status_code = 402
    title = "Invalid Payment"


class BadRequest(DanceVerifyError):
    status_code = 400
    title = "Bad Request"


class InvalidStyle(DanceVerifyError):
    status_code = 400
    title = "Invalid Style"


class NotFound(DanceVerifyError):
    status_code = 404
    title = "Not Found"
