# errors.py


class SocialMediaError(Exception):
    code = "ERROR"
    http_status = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class InvalidInput(SocialMediaError):
    code = "INVALID_INPUT"
    http_status = 400


class DuplicateUsername(SocialMediaError):
    code = "DUPLICATE_USERNAME"
    http_status = 409

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username


class Unauthorized(SocialMediaError):
    # same failure for unknown username and wrong password
    code = "UNAUTHORIZED"
    http_status = 401

    def __init__(self):
        super().__init__("Invalid username or password")
