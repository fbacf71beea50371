"""Password hashing with bcrypt, run off the event loop"""
import logging
import bcrypt
from fastapi.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 10


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


async def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a salted bcrypt hash of `password`."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = await run_in_threadpool(bcrypt.hashpw, _encode(password), salt)
    return hashed.decode("utf-8")


async def verify_password(password: str, hashed: str) -> bool:
    """Check `password` against a stored bcrypt hash."""
    try:
        return await run_in_threadpool(bcrypt.checkpw, _encode(password), hashed.encode("utf-8"))
    except ValueError as e:
        logger.warning(f"Stored password hash is not a valid bcrypt hash: {e}")
        return False
