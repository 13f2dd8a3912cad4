# Authentication and JWT Utilities

from passlib.context import CryptContext
from datetime import timedelta, datetime, timezone
from shop_admin.errors import InvalidToken
from shop_admin.config import Config
import jwt  # JSON Web Token implementation
import uuid
import logging

logger = logging.getLogger(__name__)

# Password hashing configuration using bcrypt
passwd_context = CryptContext(
    schemes=["bcrypt"]
)

# Token expiry time in seconds
ACCESS_TOKEN_EXPIRY = Config.ACCESS_TOKEN_EXPIRY_DAYS * 24 * 60 * 60  # 7 days


def generate_passwd_hash(password: str) -> str:
    hash = passwd_context.hash(password)

    return hash

def verify_password(password: str, hash: str) -> bool:
    return passwd_context.verify(password, hash)

def create_access_token(user_data: dict, expiry: timedelta = None) -> str:
    """Create a signed JWT access token.

    Args:
        user_data (dict): User information to encode in the token (id, email, roles)
        expiry (timedelta, optional): Custom lifetime. Defaults to ACCESS_TOKEN_EXPIRY

    Returns:
        str: Encoded JWT token
    """
    payload = {
        'user': user_data,
        'exp': datetime.now(timezone.utc) + (expiry if expiry is not None else timedelta(seconds=ACCESS_TOKEN_EXPIRY)),
        'jti': str(uuid.uuid4()),  # Unique token identifier for blacklisting
    }

    token = jwt.encode(
        payload = payload,
        key = Config.JWT_SECRET,
        algorithm = Config.JWT_ALGORITHM
    )

    return token

def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Args:
        token (str): The JWT token to decode

    Returns:
        dict: Decoded token payload

    Raises:
        InvalidToken: If the signature is wrong, the token is malformed or it has expired
    """
    try:
        return jwt.decode(
            jwt = token,
            key = Config.JWT_SECRET,
            algorithms = [Config.JWT_ALGORITHM]
        )

    except jwt.ExpiredSignatureError as e:
        logger.warning(f"Token expired: {str(e)}")
        raise InvalidToken("Token has expired")
    except jwt.PyJWTError as e:
        logger.warning(f"JWT error: {str(e)}")
        raise InvalidToken("Token could not be decoded")
