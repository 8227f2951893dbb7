"""
Services for talking to Tencent Cloud TRTC.

Key components:
- trtc_client: ConversationClient, a stateless wrapper over the Tencent Cloud
  SDK issuing StartAIConversation and StopAIConversation.
- usersig: UserSigGenerator, which signs UserSig tokens with the TLS Sig API v2 library.

Usage examples:
```python
from agent_gateway.services.trtc_client import ConversationClient
from agent_gateway.services.usersig import UserSigGenerator

generator = UserSigGenerator(1400000000, "secret")
user_sig = generator.generate("user_123456", 36000)

client = ConversationClient(config.api)
result = client.start_conversation(params)
client.stop_conversation(result["TaskId"])
```
"""

# Services module initialization
