from pydantic import BaseModel


"""
Song Entity:
1. id (str): Unique identifier for the song. Generated on upload, never changes.
2. file_name (str): Name of the uploaded audio file. Together with title it must be unique.
3. mime_type (str): Media type of the file (e.g audio/mpeg).
4. title (str): The title of the song.
5. singers (list[str]): Performers of the song, at least one.
6. genre (str): Free-text genre.
7. duration (int): Length in seconds. Supplied by the uploader, not verified.
8. release_date (str): Free-text release date.
9. uploaded_at (int): Upload timestamp in nanoseconds.
"""
class Song(BaseModel):
    id: str
    file_name: str
    mime_type: str
    title: str
    singers: list[str]
    genre: str = ''
    duration: int = 0
    release_date: str = ''
    uploaded_at: int


"""
SongPayload:
Fields the caller supplies when uploading a song. id and uploaded_at are
assigned by the catalog.
"""
class SongPayload(BaseModel):
    file_name: str = ''
    mime_type: str = ''
    title: str = ''
    singers: list[str] = []
    genre: str = ''
    duration: int = 0
    release_date: str = ''
