from app.domain.entities.playlist import Playlist, PlaylistPayload
from app.domain.entities.result import Result
from app.domain.entities.song import Song, SongPayload
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from app.use_cases.songs.song_use_cases import SongUseCases
from presentation.utils import result_handler


class CatalogApi:
    """
    Operations exposed to callers. Every method returns a Result instead of raising.

    Transport and authentication live outside: whoever calls a mutating method passes the
    resolved identity of the caller explicitly.
    """

    def __init__(self, song_use_cases: SongUseCases, playlist_use_cases: PlaylistUseCases):
        self.song_use_cases = song_use_cases
        self.playlist_use_cases = playlist_use_cases

    @result_handler
    async def upload_song(self, payload: SongPayload) -> Result[Song]:
        return await self.song_use_cases.upload(payload)

    @result_handler
    async def get_song(self, song_id: str) -> Result[Song]:
        return await self.song_use_cases.get(song_id)

    @result_handler
    async def get_songs(self) -> Result[list[Song]]:
        return await self.song_use_cases.get_all()

    @result_handler
    async def create_playlist(self, payload: PlaylistPayload, caller: str) -> Result[Playlist]:
        return await self.playlist_use_cases.create(payload, caller)

    @result_handler
    async def get_playlist(self, playlist_id: str) -> Result[Playlist]:
        return await self.playlist_use_cases.get(playlist_id)

    @result_handler
    async def get_playlists(self) -> Result[list[Playlist]]:
        return await self.playlist_use_cases.get_all()

    @result_handler
    async def update_playlist(self, playlist_id: str, payload: PlaylistPayload, caller: str) -> Result[Playlist]:
        return await self.playlist_use_cases.update(playlist_id, payload, caller)

    @result_handler
    async def add_songs_to_playlist(self, playlist_id: str, song_ids: list[str], caller: str) -> Result[Playlist]:
        return await self.playlist_use_cases.add_songs(playlist_id, song_ids, caller)

    @result_handler
    async def delete_playlist(self, playlist_id: str, caller: str) -> Result[Playlist]:
        return await self.playlist_use_cases.delete(playlist_id, caller)

    @result_handler
    async def delete_song_from_playlist(self, playlist_id: str, song_id: str, caller: str) -> Result[Playlist]:
        return await self.playlist_use_cases.delete_song(playlist_id, song_id, caller)
