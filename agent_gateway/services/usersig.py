"""
UserSig generation for Tencent Cloud TRTC.

A UserSig proves to the provider that the issuer knows the application's
secret key. Signatures are produced with the provider's TLS Sig API v2
library, which the provider re-verifies independently; this module checks the
inputs first so that bad configuration surfaces as ``SigningError``.
"""

import logging
from typing import Optional

import TLSSigAPIv2

from agent_gateway.config.constants import LOGGER_NAME
from agent_gateway.errors import SigningError

logger = logging.getLogger(LOGGER_NAME)


class UserSigGenerator:
    """
    Generates UserSig tokens for one TRTC application.

    The generator holds only the application id and the secret key; every
    signature reflects the time at which it was generated.
    """

    def __init__(self, sdk_app_id: Optional[int], secret_key: Optional[str]):
        if not sdk_app_id:
            raise SigningError("SDK app id is not configured")
        if not secret_key:
            raise SigningError("Secret key cannot be empty")
        self.sdk_app_id = int(sdk_app_id)
        self._api = TLSSigAPIv2.TLSSigAPIv2(self.sdk_app_id, secret_key)

    def generate(self, identifier: str, expire_seconds: int) -> str:
        """
        Generate a UserSig for ``identifier`` valid for ``expire_seconds``.

        Args:
            identifier: The user id the signature is bound to
            expire_seconds: Lifetime in seconds, counted from now

        Returns:
            The signature string

        Raises:
            SigningError: If the identifier is empty or the lifetime is not positive
        """
        if not identifier:
            raise SigningError("Identifier cannot be empty")
        if isinstance(expire_seconds, bool) or not isinstance(expire_seconds, int) or expire_seconds <= 0:
            raise SigningError(f"Expire time must be a positive integer, got {expire_seconds!r}")

        user_sig = self._api.gen_sig(str(identifier), expire_seconds)
        logger.debug(f"Generated UserSig for {identifier}, expires in {expire_seconds}s")
        return user_sig


def gen_user_sig(sdk_app_id: int, secret_key: str, identifier: str, expire_seconds: int) -> str:
    """Convenience wrapper for a one-off signature."""
    return UserSigGenerator(sdk_app_id, secret_key).generate(identifier, expire_seconds)
