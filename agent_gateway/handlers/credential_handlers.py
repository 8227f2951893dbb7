"""
Handler for minting ephemeral TRTC credentials.

A random six digit number names the room and both participants, so a browser
client can join the room as ``user_<n>`` and pass ``ai_<n>`` with its UserSig
to POST /conversations.
"""

import logging
import random

from agent_gateway.config.constants import CREDENTIAL_ID_MAX, CREDENTIAL_ID_MIN, LOGGER_NAME
from agent_gateway.config.settings import AgentConfig
from agent_gateway.models.request_schemas import Credentials
from agent_gateway.services.usersig import UserSigGenerator

logger = logging.getLogger(LOGGER_NAME)


def generate_credentials(config: AgentConfig) -> Credentials:
    """
    Generate identities and UserSigs for a user and an AI participant.

    Args:
        config: Static agent configuration holding the signing key

    Returns:
        Credentials with distinct user and robot signatures

    Raises:
        SigningError: If the signing configuration is incomplete
    """
    trtc = config.trtc
    generator = UserSigGenerator(trtc.sdk_app_id, trtc.secret_key)

    random_num = random.randint(CREDENTIAL_ID_MIN, CREDENTIAL_ID_MAX)
    user_id = f"user_{random_num}"
    robot_id = f"ai_{random_num}"

    credentials = Credentials(
        sdkAppId=generator.sdk_app_id,
        userSig=generator.generate(user_id, trtc.expire_time),
        robotSig=generator.generate(robot_id, trtc.expire_time),
        userId=user_id,
        robotId=robot_id,
        roomId=random_num,
    )
    logger.info(f"Generated credentials for room {random_num}")
    return credentials
