import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from app.domain.entities.playlist import PlaylistPayload
from app.domain.entities.song import SongPayload
from app.domain.services_interfaces.clock import ClockInterface
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from app.use_cases.songs.song_use_cases import SongUseCases
from infrastructure.redis_config import RedisPool
from presentation.service import build_catalog_api, build_repo_service


class FakeClock(ClockInterface):
    """Ticks by one second on every call."""

    def __init__(self, start: int = 1_700_000_000_000_000_000):
        self.current = start

    def now(self) -> int:
        self.current += 1_000_000_000
        return self.current


class SequentialIds(IdGeneratorInterface):
    def __init__(self):
        self.counter = 0

    def generate(self) -> str:
        self.counter += 1
        return f'id-{self.counter:04d}'


def song_payload(title='Song', file_name='song.mp3', duration=180, **fields) -> SongPayload:
    data = {
        'file_name': file_name,
        'mime_type': 'audio/mpeg',
        'title': title,
        'singers': ['Singer'],
        'genre': 'pop',
        'duration': duration,
        'release_date': '2020-01-01',
    }
    data.update(fields)
    return SongPayload(**data)


def playlist_payload(name='Road trip', description='Songs for the road') -> PlaylistPayload:
    return PlaylistPayload(name=name, description=description)


@pytest.fixture
def redis_server():
    return FakeServer()


@pytest.fixture
async def redis_pool(redis_server):
    pool = RedisPool(host='localhost', port=6379, db=0, client=FakeAsyncRedis(server=redis_server))
    await pool.create_pool()
    yield pool
    await pool.close_pool()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repo_service(redis_pool, clock):
    return build_repo_service(redis_pool, clock=clock, id_generator=SequentialIds())


@pytest.fixture
def song_use_cases(repo_service):
    return SongUseCases(repo_service.song_store, repo_service.clock, repo_service.id_generator)


@pytest.fixture
def playlist_use_cases(repo_service):
    return PlaylistUseCases(repo_service.playlist_store, repo_service.song_store,
                            repo_service.clock, repo_service.id_generator)


@pytest.fixture
def api(repo_service):
    return build_catalog_api(repo_service)
