"""
Constants and configuration values used throughout the application.

This module defines constants that are used across different parts of the application,
providing a centralized location for configuration values and making it easier to
maintain consistent naming throughout the codebase.
"""

# Logger name used throughout the application
LOGGER_NAME = "agent_gateway"

# Provider defaults
DEFAULT_REGION = "ap-beijing"
DEFAULT_ENDPOINT = "trtc.tencentcloudapi.com"

# UserSig lifetime: 10 hours
DEFAULT_SIG_EXPIRE_SECONDS = 10 * 60 * 60

# Server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = "static"
STATIC_MAX_AGE_SECONDS = 60

# Fields that must be present in userInfo to start a conversation
REQUIRED_USER_INFO_FIELDS = ["sdkAppId", "roomId", "robotId", "robotSig", "userId"]

# Range of the random suffix used for generated user/robot/room ids
CREDENTIAL_ID_MIN = 100000
CREDENTIAL_ID_MAX = 999999
