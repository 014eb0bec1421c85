from app.domain.entities.playlist import PlaylistPayload
from app.domain.entities.song import SongPayload
from app.domain.exceptions import StorageError
from conftest import playlist_payload, song_payload


ADMIN = 'admin-principal'


async def test_successful_calls_return_ok(api):
    uploaded = await api.upload_song(song_payload(duration=90))
    assert uploaded.is_ok
    assert uploaded.err is None

    fetched = await api.get_song(uploaded.ok.id)
    assert fetched.ok == uploaded.ok

    songs = await api.get_songs()
    assert songs.ok == [uploaded.ok]


async def test_errors_are_returned_not_raised(api):
    result = await api.upload_song(SongPayload())

    assert not result.is_ok
    assert result.ok is None
    assert result.err.kind == 'ValidationError'
    assert result.err.message == 'File name cannot be empty.'


async def test_playlist_flow(api):
    song = (await api.upload_song(song_payload(duration=240))).ok
    playlist = (await api.create_playlist(playlist_payload(), ADMIN)).ok

    added = await api.add_songs_to_playlist(playlist.id, [song.id], ADMIN)
    assert added.ok.total_duration == 240

    renamed = await api.update_playlist(playlist.id, PlaylistPayload(name='Night', description='Late'), ADMIN)
    assert renamed.ok.name == 'Night'
    assert renamed.ok.songs == [song.id]

    removed = await api.delete_song_from_playlist(playlist.id, song.id, ADMIN)
    assert removed.ok.songs == []
    assert removed.ok.total_duration == 0

    deleted = await api.delete_playlist(playlist.id, ADMIN)
    assert deleted.ok.id == playlist.id
    assert (await api.get_playlists()).ok == []


async def test_error_kinds(api):
    song = (await api.upload_song(song_payload())).ok
    playlist = (await api.create_playlist(playlist_payload(), ADMIN)).ok

    assert (await api.upload_song(song_payload())).err.kind == 'DuplicateError'
    assert (await api.get_playlist('missing')).err.kind == 'NotFoundError'
    assert (await api.delete_playlist(playlist.id, 'intruder')).err.kind == 'AuthorizationError'
    assert (await api.add_songs_to_playlist(playlist.id, ['missing'], ADMIN)).err.kind == 'NothingAddedError'
    assert (await api.add_songs_to_playlist(playlist.id, [song.id], ADMIN)).is_ok


class FailingStore:
    async def get(self, key):
        raise StorageError('storage is down')

    async def insert(self, key, value):
        raise StorageError('storage is down')

    async def remove(self, key):
        raise StorageError('storage is down')

    async def values(self):
        raise StorageError('storage is down')


async def test_storage_failure_becomes_error_result(api):
    api.song_use_cases.song_store = FailingStore()

    result = await api.upload_song(song_payload())

    assert result.err.kind == 'StorageError'
    assert result.err.message == 'storage is down'


class ReadOnlyStore:
    """Reads go to the real store, writes fail."""

    def __init__(self, store):
        self.store = store

    async def get(self, key):
        return await self.store.get(key)

    async def values(self):
        return await self.store.values()

    async def insert(self, key, value):
        raise StorageError('storage is read-only')

    async def remove(self, key):
        raise StorageError('storage is read-only')


async def test_failed_playlist_write_becomes_error_result(api):
    song = (await api.upload_song(song_payload(duration=90))).ok
    playlist = (await api.create_playlist(playlist_payload(), ADMIN)).ok
    playlist_store = api.playlist_use_cases.playlist_store
    api.playlist_use_cases.playlist_store = ReadOnlyStore(playlist_store)

    added = await api.add_songs_to_playlist(playlist.id, [song.id], ADMIN)
    deleted = await api.delete_playlist(playlist.id, ADMIN)

    assert added.err.kind == 'StorageError'
    assert deleted.err.kind == 'StorageError'
    assert await playlist_store.get(playlist.id) == playlist
