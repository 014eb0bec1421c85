from pydantic import BaseModel
from typing import Optional

"""
Playlist Entity:
1. id (str): Unique identifier for the playlist. Generated on creation, never changes.
2. admin (str): Identity of the creator. Only the admin may change or delete the playlist.
3. name (str): Name of the playlist, unique across all playlists.
4. description (str): Description of the playlist.
5. songs (list[str]): Identifiers of the songs in the playlist, in insertion order, without duplicates.
6. total_duration (int): Sum of the durations (seconds) of the songs in the playlist.
7. created_at (int): Creation timestamp in nanoseconds.
8. updated_at (int, None): Timestamp of the last change. None until the playlist is changed for the first time.
"""

class Playlist(BaseModel):
    id: str
    admin: str
    name: str
    description: str
    songs: list[str] = []
    total_duration: int = 0
    created_at: int
    updated_at: Optional[int] = None


class PlaylistPayload(BaseModel):
    name: str = ''
    description: str = ''
