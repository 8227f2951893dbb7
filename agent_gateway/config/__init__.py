"""
Configuration module for the conversation gateway.

Key components:
- constants: Application-wide constants such as the logger name and provider defaults.
- logging_config: Console and rotating file logging for the application logger.
- settings: The immutable AgentConfig assembled from environment variables.

Usage examples:
```python
from agent_gateway.config.logging_config import configure_logging
from agent_gateway.config.settings import AgentConfig

logger = configure_logging()
config = AgentConfig.from_env()
logger.info(f"Provider region: {config.api.region}")
```
"""

# Config module initialization
