"""Channel lookup shared by Discord services."""

import discord


def resolve_messageable(
    client: discord.Client, channel_id: str
) -> discord.abc.Messageable:
    """Resolve a channel ID to something that can be read from and sent to.

    Uses the client cache when the channel is known, otherwise a partial
    messageable that needs no extra API call.

    Args:
        client: Discord client.
        channel_id: Channel ID.

    Returns:
        Messageable channel.
    """
    snowflake = int(channel_id)
    channel = client.get_channel(snowflake)
    if channel is None:
        return client.get_partial_messageable(snowflake)
    return channel
