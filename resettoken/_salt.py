import math
import secrets
import string

DEFAULT_CHARS = string.ascii_letters + string.digits


def generate_salt(entropy_bits: int = 256, chars: str = DEFAULT_CHARS) -> str:
    """
    Generate a random application salt carrying at least ``entropy_bits`` of entropy.

    Keep it apart from the stored secrets, e.g. in a secrets manager,
    so a leaked database alone isn't enough to forge reset tokens.
    """
    if entropy_bits <= 0:
        raise ValueError("entropy_bits must be positive")
    if len(chars) < 2:
        raise ValueError("chars must contain at least 2 characters")
    length = math.ceil(entropy_bits / math.log2(len(chars)))
    return "".join(secrets.choice(chars) for _ in range(length))
