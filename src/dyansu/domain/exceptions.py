"""Domain exceptions."""


class ChannelNotAccessibleError(Exception):
    """チャンネルにアクセスできない場合に発生する例外

    ボットがチャンネルの閲覧・投稿権限を持たない場合や、
    チャンネルが削除された場合などに発生する。
    """

    def __init__(self, channel_id: str, message: str = "") -> None:
        """初期化

        Args:
            channel_id: アクセスできないチャンネルのID
            message: エラーメッセージ（オプション）
        """
        self.channel_id = channel_id
        super().__init__(message or f"Channel {channel_id} is not accessible")


class HistoryFetchError(Exception):
    """チャンネル履歴の取得に失敗した場合に発生する例外"""

    def __init__(self, channel_id: str, message: str = "") -> None:
        """初期化

        Args:
            channel_id: 履歴を取得しようとしたチャンネルのID
            message: エラーメッセージ（オプション）
        """
        self.channel_id = channel_id
        super().__init__(message or f"Failed to fetch history of channel {channel_id}")
