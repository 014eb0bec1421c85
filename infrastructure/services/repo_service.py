# Repository service that keeps the wired stores and collaborators together for the facade.
class RepoService:
    def __init__(self, redis_pool, song_store, playlist_store, clock, id_generator):
        self.redis_pool = redis_pool
        self.song_store = song_store
        self.playlist_store = playlist_store
        self.clock = clock
        self.id_generator = id_generator
