"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Uses bcrypt directly for secure password storage.
Passwords are never stored in plain text — always hashed with bcrypt.
"""

import secrets
import string

import bcrypt

# 재설정 비밀번호 문자 집합 — 혼동되는 문자(0/O, 1/l/I) 제외
# Reset password alphabet without look-alike characters
_RESET_ALPHABET: str = "".join(
    c for c in string.ascii_letters + string.digits if c not in "0O1lI"
)


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password using bcrypt.
    The resulting hash includes a random salt, making each hash unique
    even for identical passwords.

    Args:
        password: 평문 비밀번호 (Plain text password to hash)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash.
    A stored value that is not a valid bcrypt hash never matches.

    Args:
        plain_password: 검증할 평문 비밀번호 (Plain text password to verify)
        hashed_password: 저장된 bcrypt 해시 (Stored bcrypt hash to compare against)

    Returns:
        bool: 일치하면 True, 불일치하면 False (True if password matches hash)
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # 잘못된 솔트/해시 형식 — Invalid salt or hash format
        return False


def generate_random_password(length: int = 8) -> str:
    """임시 비밀번호를 생성합니다 (비밀번호 재설정용).

    Generate a random temporary password for the forgot-password flow.
    Always contains at least one letter and one digit.
    """
    while True:
        password = "".join(secrets.choice(_RESET_ALPHABET) for _ in range(length))
        if any(c.isdigit() for c in password) and any(c.isalpha() for c in password):
            return password
