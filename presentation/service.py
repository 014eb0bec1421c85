from typing import Optional
from app.domain.entities.playlist import Playlist
from app.domain.entities.song import Song
from app.domain.services_interfaces.clock import ClockInterface
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from app.use_cases.songs.song_use_cases import SongUseCases
from config.main_config import PLAYLISTS_NAMESPACE, SONGS_NAMESPACE
from infrastructure.redis_config import RedisPool
from infrastructure.repositories.ordered_store.redis_store import RedisOrderedStore
from infrastructure.services.clock_service import SystemClock
from infrastructure.services.id_service import UuidGenerator
from infrastructure.services.repo_service import RepoService
from presentation.catalog_api import CatalogApi


def build_repo_service(redis_pool: RedisPool, clock: Optional[ClockInterface] = None,
                       id_generator: Optional[IdGeneratorInterface] = None) -> RepoService:
    # Each collection gets its own namespace in the same Redis database
    song_store = RedisOrderedStore(redis_pool, SONGS_NAMESPACE, Song)
    playlist_store = RedisOrderedStore(redis_pool, PLAYLISTS_NAMESPACE, Playlist)
    return RepoService(
        redis_pool=redis_pool,
        song_store=song_store,
        playlist_store=playlist_store,
        clock=clock or SystemClock(),
        id_generator=id_generator or UuidGenerator()
    )


def build_catalog_api(repo_service: RepoService) -> CatalogApi:
    song_use_cases = SongUseCases(
        song_store=repo_service.song_store,
        clock=repo_service.clock,
        id_generator=repo_service.id_generator
    )
    playlist_use_cases = PlaylistUseCases(
        playlist_store=repo_service.playlist_store,
        song_store=repo_service.song_store,
        clock=repo_service.clock,
        id_generator=repo_service.id_generator
    )
    return CatalogApi(song_use_cases, playlist_use_cases)
