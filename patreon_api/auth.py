import os
from typing import Any, Callable, Dict, Optional

from authlib.integrations.requests_client import OAuth2Session
from dotenv import load_dotenv

from .config import ACCESS_TOKEN_URL


def token_from_env() -> Dict[str, Any]:
    """
    Creates Patreon OAuth2 token from environment variables.

    Returns:
        dict: Token with access_token, refresh_token and token_type
    """
    token = {
        'access_token': os.getenv("PATREON_ACCESS_TOKEN"),
        'token_type': 'Bearer',
    }
    refresh_token = os.getenv("PATREON_REFRESH_TOKEN")
    if refresh_token:
        token['refresh_token'] = refresh_token
    return token


def create_oauth_session(
    client_id: Optional[str],
    client_secret: Optional[str],
    token: Dict[str, Any],
    update_token: Optional[Callable[..., None]] = None
) -> OAuth2Session:
    """
    Creates requests session that signs calls with an existing OAuth2 token.

    The token endpoint is configured so authlib can refresh a token whose
    ``expires_at`` has passed; ``update_token`` receives the new token.

    Returns:
        OAuth2Session: Authenticated requests session
    """
    if not token.get('access_token'):
        raise ValueError("OAuth2 token has no access_token")

    return OAuth2Session(
        client_id=client_id,
        client_secret=client_secret,
        token=token,
        token_endpoint=ACCESS_TOKEN_URL,
        update_token=update_token,
    )


def get_oauth_session(env_file: Optional[str] = None) -> OAuth2Session:
    """
    Main function to get an authenticated session from environment variables.

    Reads PATREON_CLIENT_ID, PATREON_CLIENT_SECRET, PATREON_ACCESS_TOKEN and
    PATREON_REFRESH_TOKEN, loading a .env file first if present.
    """
    load_dotenv(env_file)
    return create_oauth_session(
        client_id=os.getenv("PATREON_CLIENT_ID"),
        client_secret=os.getenv("PATREON_CLIENT_SECRET"),
        token=token_from_env(),
    )
