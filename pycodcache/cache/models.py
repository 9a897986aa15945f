"""Server record data structures."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerRecord:
    """A server entry decoded from one cache slot.

    Records are plain values: two records compare equal when every field
    matches, which is what deduplication relies on.
    """

    name: str
    ip: str
    port: int
    map: str
    mod: str
    game_mode: str
    players_online: int
    max_players: int

    @property
    def address(self) -> str:
        """Get the full server address (ip:port)."""
        return f"{self.ip}:{self.port}"

    def __str__(self) -> str:
        """String representation of server."""
        return (f"{self.name}({self.address}) playing {self.game_mode}({self.mod}) "
                f"on {self.map} with {self.players_online}/{self.max_players}")
