import secrets
import string


def generate_otp(length: int = 6) -> str:
    """Generate a numeric one-time code of `length` digits."""
    return ''.join(secrets.choice(string.digits) for _ in range(length))
