import asyncio
import logging
from config.logging_config import setup_logging
from config.main_config import REDIS_DB, REDIS_HOST, REDIS_PORT
from infrastructure.redis_config import RedisPool
from presentation.service import build_catalog_api, build_repo_service


logger = logging.getLogger(__name__)


async def main():
    setup_logging()
    redis_pool = RedisPool(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB)
    await redis_pool.create_pool()
    try:
        api = build_catalog_api(build_repo_service(redis_pool))
        songs = await api.get_songs()
        playlists = await api.get_playlists()
        if songs.is_ok and playlists.is_ok:
            logger.info(f"Catalog ready: {len(songs.ok)} song(s), {len(playlists.ok)} playlist(s)")
        else:
            logger.error(f"Catalog storage unavailable: {(songs.err or playlists.err).message}")
    finally:
        await redis_pool.close_pool()


if __name__ == '__main__':
    asyncio.run(main())
