# utils/password.py
from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def verify_password(hashed: str, plain: str) -> bool:
    if not hashed:
        # OAuth-provisioned users have no local credential
        return False
    return check_password_hash(hashed, plain)
