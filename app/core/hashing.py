from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


class Hasher:
    @staticmethod
    def _truncate_password(password: str) -> str:
        # Drop a trailing partial multi-byte character left by the cut
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(Hasher._truncate_password(password))

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        return pwd_context.verify(Hasher._truncate_password(plain_password), hashed_password)
