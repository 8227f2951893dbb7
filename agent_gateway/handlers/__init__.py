"""
Request handlers for the gateway's HTTP endpoints.

Key components:
- conversation_handlers: Validate start/stop requests, build StartAIConversation
  parameters and call the provider.
- credential_handlers: Generate room and participant identities with UserSigs.

Handlers raise GatewayError subclasses; the FastAPI application maps them to
JSON error responses.
"""

# Handlers module initialization
