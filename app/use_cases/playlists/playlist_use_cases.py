import asyncio
import logging
from typing import Optional
from app.domain.repositories_interfaces.ordered_store import OrderedStoreInterface
from app.domain.services_interfaces.clock import ClockInterface
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from app.domain.entities.playlist import Playlist, PlaylistPayload
from app.domain.entities.song import Song
from app.domain.exceptions import (AuthorizationError, DuplicateError, ErrMessages, NotFoundError,
                                   NothingAddedError, ValidationError)
from app.use_cases.validation import require_not_blank


logger = logging.getLogger('use_cases')


class PlaylistUseCases:
    def __init__(self, playlist_store: OrderedStoreInterface[Playlist], song_store: OrderedStoreInterface[Song],
                 clock: ClockInterface, id_generator: IdGeneratorInterface):
        self.playlist_store = playlist_store
        # Songs are only read here, to resolve durations
        self.song_store = song_store
        self.clock = clock
        self.id_generator = id_generator
        self._write_lock = asyncio.Lock()

    async def _find_by_name(self, name: str) -> Optional[Playlist]:
        for playlist in await self.playlist_store.values():
            if playlist.name == name:
                return playlist
        return None

    async def _get_owned(self, playlist_id: str, caller: str, not_found_message: str) -> Playlist:
        """
        Fetches the playlist and checks that the caller is its admin.

        :param playlist_id: The unique identifier of the playlist.
        :param caller: Identity of the user issuing the call.
        :param not_found_message: Message of the NotFoundError raised when there is no such playlist.
        :return: The stored Playlist object.
        """
        playlist = await self.playlist_store.get(playlist_id)
        if playlist is None:
            raise NotFoundError(not_found_message)
        if playlist.admin != caller:
            logger.warning(f"Rejected change of playlist {playlist_id}", extra={'user': caller})
            raise AuthorizationError(ErrMessages.non_admin(playlist_id))
        return playlist

    async def create(self, payload: PlaylistPayload, caller: str) -> Playlist:
        """
        Creates a new empty playlist owned by the caller.

        :param payload: Name and description of the playlist.
        :param caller: Identity of the user creating the playlist. Becomes its admin.
        :return: The stored Playlist object.
        :raises ValidationError: If name or description is empty.
        :raises DuplicateError: If a playlist with this name already exists.
        """
        require_not_blank(payload.name, 'Playlist name')
        require_not_blank(payload.description, 'Playlist description')

        async with self._write_lock:
            if await self._find_by_name(payload.name):
                raise DuplicateError(ErrMessages.already_exists('Playlist'))

            playlist = Playlist(
                id=self.id_generator.generate(),
                admin=caller,
                name=payload.name,
                description=payload.description,
                songs=[],
                total_duration=0,
                created_at=self.clock.now(),
                updated_at=None
            )
            await self.playlist_store.insert(playlist.id, playlist)

        logger.info(f"Playlist '{playlist.name}' created with id {playlist.id}", extra={'user': caller})
        return playlist

    async def get(self, playlist_id: str) -> Playlist:
        require_not_blank(playlist_id, 'Playlist id')
        playlist = await self.playlist_store.get(playlist_id)
        if playlist is None:
            raise NotFoundError(ErrMessages.record_not_found('Playlist', playlist_id))
        return playlist

    async def get_all(self) -> list[Playlist]:
        return await self.playlist_store.values()

    async def update(self, playlist_id: str, payload: PlaylistPayload, caller: str) -> Playlist:
        """
        Replaces name and description of a playlist.

        :param playlist_id: The unique identifier of the playlist to update.
        :param payload: The new name and description.
        :param caller: Identity of the user issuing the call. Must be the admin.
        :return: The updated Playlist object.
        """
        require_not_blank(playlist_id, 'Playlist id')
        if not payload.name.strip() or not payload.description.strip():
            raise ValidationError(ErrMessages.field_cannot_be_empty('Name or description'))

        async with self._write_lock:
            playlist = await self._get_owned(playlist_id, caller,
                                             ErrMessages.could_not_update('playlist', playlist_id))

            same_name = await self._find_by_name(payload.name)
            if same_name and same_name.id != playlist.id:
                raise DuplicateError(ErrMessages.already_exists('Playlist'))

            updated = playlist.model_copy(update={
                'name': payload.name,
                'description': payload.description,
                'updated_at': self.clock.now()
            })
            await self.playlist_store.insert(updated.id, updated)

        logger.info(f"Playlist {playlist_id} updated", extra={'user': caller})
        return updated

    async def add_songs(self, playlist_id: str, song_ids: list[str], caller: str) -> Playlist:
        """
        Appends songs to a playlist and adds their durations to the total.

        Songs missing from the catalog and songs already in the playlist are skipped.
        The playlist is written once, and only if at least one song was added.

        :param playlist_id: The unique identifier of the playlist.
        :param song_ids: Identifiers of the songs to add, in the order they should appear.
        :param caller: Identity of the user issuing the call. Must be the admin.
        :return: The updated Playlist object.
        :raises NothingAddedError: If every song was skipped.
        """
        require_not_blank(playlist_id, 'Playlist id')
        if not song_ids:
            raise ValidationError(ErrMessages.field_cannot_be_empty('Song list'))

        async with self._write_lock:
            playlist = await self._get_owned(playlist_id, caller,
                                             ErrMessages.could_not_update('playlist', playlist_id))

            songs = list(playlist.songs)
            total_duration = playlist.total_duration
            for song_id in song_ids:
                song = await self.song_store.get(song_id) if song_id else None
                if song is None or song_id in songs:
                    continue
                songs.append(song_id)
                total_duration += song.duration

            if len(songs) == len(playlist.songs):
                logger.warning(f"No songs added to playlist {playlist_id}", extra={'user': caller})
                raise NothingAddedError(ErrMessages.NOTHING_ADDED)

            updated = playlist.model_copy(update={
                'songs': songs,
                'total_duration': total_duration,
                'updated_at': self.clock.now()
            })
            await self.playlist_store.insert(updated.id, updated)

        logger.info(f"{len(songs) - len(playlist.songs)} song(s) added to playlist {playlist_id}",
                    extra={'user': caller})
        return updated

    async def delete_song(self, playlist_id: str, song_id: str, caller: str) -> Playlist:
        """
        Removes a song from a playlist and subtracts its duration from the total.

        If the song is not in the playlist nothing is changed and the playlist is returned as is.
        When the song is gone from the catalog or subtracting would make the total negative,
        the total is reset to 0.

        :param playlist_id: The unique identifier of the playlist.
        :param song_id: The ID of the song to remove.
        :param caller: Identity of the user issuing the call. Must be the admin.
        :return: The updated Playlist object.
        """
        require_not_blank(playlist_id, 'Playlist id')
        require_not_blank(song_id, 'Song id')

        async with self._write_lock:
            playlist = await self._get_owned(playlist_id, caller,
                                             ErrMessages.could_not_remove('playlist', playlist_id))
            if song_id not in playlist.songs:
                return playlist

            songs = [member for member in playlist.songs if member != song_id]
            song = await self.song_store.get(song_id)
            if song is not None and playlist.total_duration - song.duration >= 0:
                total_duration = playlist.total_duration - song.duration
            else:
                total_duration = 0

            updated = playlist.model_copy(update={
                'songs': songs,
                'total_duration': total_duration,
                'updated_at': self.clock.now()
            })
            await self.playlist_store.insert(updated.id, updated)

        logger.info(f"Song {song_id} removed from playlist {playlist_id}", extra={'user': caller})
        return updated

    async def delete(self, playlist_id: str, caller: str) -> Playlist:
        """
        Deletes a playlist.

        :param playlist_id: The unique identifier of the playlist to delete.
        :param caller: Identity of the user issuing the call. Must be the admin.
        :return: The deleted Playlist object.
        """
        require_not_blank(playlist_id, 'Playlist id')

        async with self._write_lock:
            playlist = await self._get_owned(playlist_id, caller,
                                             ErrMessages.could_not_remove('playlist', playlist_id))
            await self.playlist_store.remove(playlist_id)

        logger.info(f"Playlist {playlist_id} deleted", extra={'user': caller})
        return playlist
