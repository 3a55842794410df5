from signup_api.models.user import User

__all__ = ["User"]
