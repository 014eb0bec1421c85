import os


REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
REDIS_PORT = int(os.getenv('REDIS_PORT', '6379'))
REDIS_DB = int(os.getenv('REDIS_DB', '0'))

# Key prefixes of the two collections in Redis
SONGS_NAMESPACE = os.getenv('SONGS_NAMESPACE', 'song')
PLAYLISTS_NAMESPACE = os.getenv('PLAYLISTS_NAMESPACE', 'playlist')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FILE = os.getenv('LOG_FILE')
