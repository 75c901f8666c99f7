"""
auth_utils.py — Sign-in Helpers
-------------------------------

Glaucus delegates sign-in to an OpenID Connect provider (e.g. Google) through
Streamlit's built-in `st.login()` / `st.logout()`. The provider is configured
in the `[auth]` section of `.streamlit/secrets.toml`:

    [auth]
    redirect_uri = "http://localhost:8501/oauth2callback"
    cookie_secret = "..."
    client_id = "..."
    client_secret = "..."
    server_metadata_url = "https://accounts.google.com/.well-known/openid-configuration"

These helpers turn the signed-in user into the explicit submitter id that is
stored with each detection.

Dependencies:
- Streamlit (with Authlib) for OIDC sign-in

Project: Glaucus Fish Identification
"""

from typing import Optional

from config.settings import ANONYMOUS_SUBMITTER


def auth_configured(secrets) -> bool:
    """
    True when secrets.toml has an [auth] section for st.login().
    """
    try:
        return "auth" in secrets
    except FileNotFoundError:
        # No secrets.toml at all
        return False


def signed_in_email(user) -> Optional[str]:
    """
    Email of the signed-in user, or None when nobody is signed in.
    """
    if not getattr(user, "is_logged_in", False):
        return None
    email = getattr(user, "email", None)
    return email.strip() if email and email.strip() else None


def submitter_label(user) -> str:
    return signed_in_email(user) or ANONYMOUS_SUBMITTER
