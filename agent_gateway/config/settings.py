"""
Environment-derived configuration for the conversation gateway.

The configuration is assembled once at startup by ``AgentConfig.from_env`` and
handed to ``create_app``. Every model here is frozen, so handlers and clients
share it read-only.

Nested blocks that are forwarded to the provider (``agent``, ``stt``, ``llm``,
``tts``) use the provider's field names so that ``model_dump()`` yields the
request structure directly.
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from agent_gateway.config.constants import (
    DEFAULT_ENDPOINT,
    DEFAULT_REGION,
    DEFAULT_SIG_EXPIRE_SECONDS,
    DEFAULT_STATIC_DIR,
)

DEFAULT_SYSTEM_PROMPT = """
# 基础人设
- 名称：智慧小助手
- 性格：友好、温暖、知识渊博
- 风格：亲切自然，语气温和，耐心解答

# 能力范围
- 日常问答：回答用户的日常生活问题
- 百科知识：提供各领域的知识和信息
- 生活建议：给出实用的生活小窍门和建议
- 陪伴聊天：陪伴用户轻松聊天，解答疑惑

# 聊天规则
1. 回答方式
- 回答要简明扼要，不过于冗长
- 语气亲切友好，如同朋友般交流
- 专业知识要通俗易懂，避免晦涩难懂的术语

2. 互动方式
- 耐心倾听用户问题
- 在不确定的情况下，坦诚告知并尝试提供相关信息
- 适当表达关心，但保持适度的专业性
"""


class FrozenModel(BaseModel):
    """Base for immutable configuration blocks."""

    model_config = ConfigDict(frozen=True)


class ApiConfig(FrozenModel):
    """Tencent Cloud account credentials used to call the TRTC API."""

    secret_id: Optional[str] = None
    secret_key: Optional[str] = None
    region: str = DEFAULT_REGION
    endpoint: str = DEFAULT_ENDPOINT


class TrtcConfig(FrozenModel):
    """Application credentials used to sign UserSig tokens."""

    sdk_app_id: Optional[int] = None
    secret_key: Optional[str] = None
    expire_time: int = DEFAULT_SIG_EXPIRE_SECONDS


class AgentCard(FrozenModel):
    """Public description of the agent, shown on the root endpoint."""

    name: str = "智慧小助手"
    description: str = "我是你的AI助手，可以回答日常问题、聊天解闷、提供百科知识。随时随地为你提供帮助！"
    capabilities: List[str] = Field(
        default_factory=lambda: ["日常问答", "知识百科", "生活建议", "轻松聊天", "实时互动"]
    )
    voiceType: str = "温柔女声"
    personality: str = "友好、知识丰富、温暖、有耐心"


class AgentSettings(FrozenModel):
    """Behaviour of the AI participant, merged into AgentConfig of the request."""

    WelcomeMessage: str = "你好，我是你的智慧小助手，有什么我可以帮你的吗？"
    InterruptMode: int = 2
    TurnDetectionMode: int = 3
    InterruptSpeechDuration: int = 200
    WelcomeMessagePriority: int = 1


class STTConfig(FrozenModel):
    """Speech recognition block."""

    Language: str = "zh"
    VadSilenceTime: int = 600
    HotWordList: str = "小助手|11,解闷|11"
    VadLevel: int = 2


class LLMConfig(FrozenModel):
    """Language model block, sent to the provider as a JSON string."""

    LLMType: str = "openai"
    Model: Optional[str] = None
    APIUrl: Optional[str] = None
    APIKey: Optional[str] = None
    History: int = 5
    Timeout: int = 3
    Streaming: bool = True
    SystemPrompt: str = DEFAULT_SYSTEM_PROMPT


class TTSConfig(FrozenModel):
    """Text-to-speech block, sent to the provider as a JSON string."""

    TTSType: str = "new"
    APIKey: Optional[str] = None
    APIUrl: Optional[str] = None
    SampleRate: int = 24000
    VoiceId: Optional[str] = None


def _parse_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    # Unset or unparsable values fall back to the default
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


class AgentConfig(FrozenModel):
    """Process-wide configuration, loaded once and never mutated."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    trtc: TrtcConfig = Field(default_factory=TrtcConfig)
    card: AgentCard = Field(default_factory=AgentCard)
    agent: AgentSettings = Field(default_factory=AgentSettings)
    stt: STTConfig = Field(default_factory=STTConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    tts: TTSConfig = Field(default_factory=TTSConfig)
    static_dir: str = DEFAULT_STATIC_DIR

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AgentConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from, ``os.environ`` when omitted

        Returns:
            AgentConfig: The immutable configuration
        """
        env = os.environ if environ is None else environ

        return cls(
            api=ApiConfig(
                secret_id=env.get("TENCENT_SECRET_ID"),
                secret_key=env.get("TENCENT_SECRET_KEY"),
                region=env.get("TENCENT_REGION") or DEFAULT_REGION,
                endpoint=env.get("TENCENT_ENDPOINT") or DEFAULT_ENDPOINT,
            ),
            trtc=TrtcConfig(
                sdk_app_id=_parse_int(env.get("TRTC_SDK_APP_ID"), None),
                secret_key=env.get("TRTC_SECRET_KEY"),
            ),
            llm=LLMConfig(
                Model=env.get("LLM_MODEL"),
                APIUrl=env.get("LLM_API_URL"),
                APIKey=env.get("LLM_API_KEY"),
            ),
            tts=TTSConfig(
                TTSType=env.get("TTS_TYPE") or "new",
                APIKey=env.get("TTS_API_KEY"),
                APIUrl=env.get("TTS_API_URL"),
                SampleRate=_parse_int(env.get("TTS_SAMPLE_RATE"), 24000),
                VoiceId=env.get("TTS_VOICE_ID"),
            ),
            static_dir=env.get("STATIC_DIR") or DEFAULT_STATIC_DIR,
        )

    @property
    def provider_configured(self) -> bool:
        return bool(self.api.secret_id and self.api.secret_key)

    @property
    def signing_configured(self) -> bool:
        return bool(self.trtc.sdk_app_id and self.trtc.secret_key)

    def missing_settings(self) -> List[str]:
        """Return the names of required environment variables that are not set."""
        missing = []
        if not self.api.secret_id:
            missing.append("TENCENT_SECRET_ID")
        if not self.api.secret_key:
            missing.append("TENCENT_SECRET_KEY")
        if not self.trtc.sdk_app_id:
            missing.append("TRTC_SDK_APP_ID")
        if not self.trtc.secret_key:
            missing.append("TRTC_SECRET_KEY")
        return missing
