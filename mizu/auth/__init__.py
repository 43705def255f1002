from .service import LoginService
from .models import TokenClaims, TelegramUser, WalletUser
from .tokens import decode_session_token, read_claims, HASURA_CLAIMS_NAMESPACE

__all__ = [
    "LoginService",
    "TokenClaims",
    "TelegramUser",
    "WalletUser",
    "decode_session_token",
    "read_claims",
    "HASURA_CLAIMS_NAMESPACE",
]
