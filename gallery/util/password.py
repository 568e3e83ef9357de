"""Password hashing utilities built on werkzeug.security."""

from functools import lru_cache

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str, method: str = "scrypt") -> str:
    """Hash a password with a per-password random salt.

    Args:
        password: Plaintext password
        method: werkzeug hashing method ("scrypt", "pbkdf2:sha256:600000", ...)

    Returns:
        Encoded hash including method, salt and digest
    """
    return generate_password_hash(password, method=method)


def verify_password(password_hash: str, password: str) -> bool:
    """Check a password against a stored hash in constant time."""
    return check_password_hash(password_hash, password)


@lru_cache(maxsize=4)
def _dummy_hash(method: str) -> str:
    return generate_password_hash("dummy-password-for-timing", method=method)


def burn_verification(password: str, method: str = "scrypt") -> None:
    """Spend the same work as a real check when there is no hash to compare.

    Keeps unknown-email logins indistinguishable from wrong-password logins.
    """
    check_password_hash(_dummy_hash(method), password)


# Work floor for configured methods: 2**10 for scrypt's N, like a bcrypt cost of 10
MIN_SCRYPT_COST = 2**10
MIN_PBKDF2_ITERATIONS = 1000


def check_hash_method(method: str) -> str:
    """Reject werkzeug method strings below the work floor.

    Accepts "scrypt[:n[:r[:p]]]" with n >= 2**10 and
    "pbkdf2[:hash[:iterations]]" with at least 1000 iterations.

    Raises:
        ValueError: If the method is unknown or too cheap
    """
    name, *params = method.split(":")
    if name == "scrypt":
        cost = int(params[0]) if params else MIN_SCRYPT_COST
        if cost < MIN_SCRYPT_COST:
            raise ValueError(f"scrypt cost must be at least {MIN_SCRYPT_COST}")
        return method
    if name == "pbkdf2":
        iterations = int(params[1]) if len(params) > 1 else MIN_PBKDF2_ITERATIONS
        if iterations < MIN_PBKDF2_ITERATIONS:
            raise ValueError(
                f"pbkdf2 iterations must be at least {MIN_PBKDF2_ITERATIONS}"
            )
        return method
    raise ValueError(f"Unsupported password hash method: {method!r}")
