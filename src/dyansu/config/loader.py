"""YAML設定ファイルの読み込みと環境変数展開"""

import copy
import os
import re
from pathlib import Path
from typing import Any

import yaml

from dyansu.config.models import (
    DEFAULT_APOLOGY_MESSAGE,
    DEFAULT_SYSTEM_PROMPT,
    Config,
    DiscordConfig,
    LLMConfig,
    LoggingConfig,
    PersonaConfig,
    ResponseConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name
        super().__init__(f"Environment variable '{var_name}' is not set")


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

# Discord の履歴取得 1 ページあたりの上限
MAX_HISTORY_LIMIT = 100

# 設定ファイルがない場合、またはセクションが省略された場合に使う値
DEFAULT_CONFIG: dict[str, Any] = {
    "discord": {
        "bot_token": "${DISCORD_TOKEN}",
    },
    "llm": {
        "model": "gpt-3.5-turbo",
        "api_key": "${OPENAI_KEY}",
    },
    "persona": {
        "name": "マメゾンボヌールの使用人",
        "system_prompt": DEFAULT_SYSTEM_PROMPT,
    },
    "response": {
        "history_limit": 8,
        "exclude_trigger_message": False,
        "apology_message": DEFAULT_APOLOGY_MESSAGE,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "loggers": {"discord": "WARNING"},
        "debug_llm_messages": False,
    },
}

# 必ずマッピングでなければならないセクション
SECTIONS = ("discord", "llm", "persona", "response", "logging")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(var_name)
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する

    Args:
        data: 展開対象のデータ（dict, list, str, その他）

    Returns:
        環境変数が展開されたデータ
    """
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """base に override を再帰的に重ねた新しい dict を返す

    中身がすべてコメントアウトされたセクション (None) はデフォルトのまま残す。
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if field not in data or data[field] is None or data[field] == "":
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def load_config(path: str | Path | None = None) -> Config:
    """設定ファイルを読み込む

    path が None の場合は組み込みのデフォルト設定のみを使う。
    シークレットは環境変数 DISCORD_TOKEN / OPENAI_KEY から展開される。

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 必須項目が欠落、または値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    raw_data: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            raw_data = yaml.safe_load(f) or {}

        if not isinstance(raw_data, dict):
            raise ConfigValidationError("Config root must be a mapping")

    # デフォルトに重ねてから環境変数を展開
    data = _expand_recursive(_merge(DEFAULT_CONFIG, raw_data))

    for section in SECTIONS:
        if not isinstance(data.get(section), dict):
            raise ConfigValidationError(f"'{section}' must be a mapping")

    # DiscordConfig
    discord_data = data["discord"]
    discord = DiscordConfig(
        bot_token=_validate_required_field(discord_data, "bot_token", "discord"),
    )

    # LLMConfig
    llm_data = data["llm"]
    llm = LLMConfig(
        model=_validate_required_field(llm_data, "model", "llm"),
        api_key=_validate_required_field(llm_data, "api_key", "llm"),
        temperature=llm_data.get("temperature"),
        max_tokens=llm_data.get("max_tokens"),
    )

    # PersonaConfig
    persona_data = data["persona"]
    persona = PersonaConfig(
        name=_validate_required_field(persona_data, "name", "persona"),
        system_prompt=_validate_required_field(
            persona_data, "system_prompt", "persona"
        ),
    )

    # ResponseConfig
    response_data = data["response"]
    history_limit = response_data.get("history_limit", 8)
    if (
        not isinstance(history_limit, int)
        or isinstance(history_limit, bool)
        or not 1 <= history_limit <= MAX_HISTORY_LIMIT
    ):
        raise ConfigValidationError(
            f"'response.history_limit' must be an integer between 1 and "
            f"{MAX_HISTORY_LIMIT}, got {history_limit!r}"
        )
    response = ResponseConfig(
        history_limit=history_limit,
        exclude_trigger_message=bool(
            response_data.get("exclude_trigger_message", False)
        ),
        apology_message=response_data.get("apology_message") or None,
    )

    # LoggingConfig
    logging_data = data["logging"]
    logging_config = LoggingConfig(
        level=logging_data.get("level") or "INFO",
        format=logging_data.get("format")
        or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        loggers=logging_data.get("loggers"),
        debug_llm_messages=bool(logging_data.get("debug_llm_messages", False)),
    )

    return Config(
        discord=discord,
        llm=llm,
        persona=persona,
        response=response,
        logging=logging_config,
    )
