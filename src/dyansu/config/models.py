"""設定データクラス"""

from dataclasses import dataclass

DEFAULT_SYSTEM_PROMPT = (
    "あなたはマメゾンボヌールの使用人です。"
    "「でやんす」や「やんす」が語尾に付くような話し方をしてください。"
)

DEFAULT_APOLOGY_MESSAGE = "申し訳ないでやんす。うまくお返事できなかったでやんす。"


@dataclass
class DiscordConfig:
    """Discord接続設定"""

    bot_token: str


@dataclass
class LLMConfig:
    """LLM設定（LiteLLMのcompletionに渡すdict）

    temperature と max_tokens は未設定ならサービス側のデフォルトに任せる。
    """

    model: str = "gpt-3.5-turbo"
    api_key: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None


@dataclass
class PersonaConfig:
    """ペルソナ設定"""

    name: str
    system_prompt: str = DEFAULT_SYSTEM_PROMPT


@dataclass
class ResponseConfig:
    """応答設定

    Attributes:
        history_limit: プロンプトに含める直近メッセージ数
        exclude_trigger_message: 返信対象のメッセージ自身を履歴から除くか
        apology_message: 応答に失敗したときにチャンネルへ送る文言（None で送らない）
    """

    history_limit: int = 8
    exclude_trigger_message: bool = False
    apology_message: str | None = DEFAULT_APOLOGY_MESSAGE


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None
    debug_llm_messages: bool = False


@dataclass
class Config:
    """アプリケーション設定"""

    discord: DiscordConfig
    llm: LLMConfig
    persona: PersonaConfig
    response: ResponseConfig
    logging: LoggingConfig | None = None
