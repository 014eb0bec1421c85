import asyncio
import logging
from app.domain.repositories_interfaces.ordered_store import OrderedStoreInterface
from app.domain.services_interfaces.clock import ClockInterface
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from app.domain.entities.song import Song, SongPayload
from app.domain.exceptions import DuplicateError, ErrMessages, NotFoundError, ValidationError
from app.use_cases.validation import require_not_blank


logger = logging.getLogger('use_cases')


class SongUseCases:
    def __init__(self, song_store: OrderedStoreInterface[Song], clock: ClockInterface,
                 id_generator: IdGeneratorInterface):
        self.song_store = song_store
        self.clock = clock
        self.id_generator = id_generator
        # Uniqueness check and insert have to run without another upload in between
        self._write_lock = asyncio.Lock()

    async def upload(self, payload: SongPayload) -> Song:
        """
        Validates the payload and stores a new song in the catalog.

        Fields are checked in a fixed order: file name, file type, title, singers.
        The first empty one is reported.

        :param payload: Song metadata supplied by the uploader.
        :return: The stored Song with generated id and upload time.
        :raises ValidationError: If a mandatory field is empty.
        :raises DuplicateError: If a song with the same file name and title exists.
        """
        require_not_blank(payload.file_name, 'File name')
        require_not_blank(payload.mime_type, 'File type')
        require_not_blank(payload.title, 'Title')
        if not payload.singers:
            raise ValidationError(ErrMessages.NO_SINGERS)

        async with self._write_lock:
            for song in await self.song_store.values():
                if song.file_name == payload.file_name and song.title == payload.title:
                    logger.warning(f"Duplicate upload of '{payload.title}' ({payload.file_name})")
                    raise DuplicateError(ErrMessages.already_exists('Song'))

            song = Song(
                id=self.id_generator.generate(),
                uploaded_at=self.clock.now(),
                **payload.model_dump()
            )
            # StorageError from the store is not retried, it goes straight to the caller
            await self.song_store.insert(song.id, song)

        logger.info(f"Song '{song.title}' uploaded with id {song.id}")
        return song

    async def get(self, song_id: str) -> Song:
        """
        Retrieves a song by its ID.

        :param song_id: The ID of the song.
        :return: The Song object.
        :raises ValidationError: If the id is blank.
        :raises NotFoundError: If there is no such song.
        """
        require_not_blank(song_id, 'Song id')
        song = await self.song_store.get(song_id)
        if song is None:
            raise NotFoundError(ErrMessages.record_not_found('Song', song_id))
        return song

    async def get_all(self) -> list[Song]:
        return await self.song_store.values()
