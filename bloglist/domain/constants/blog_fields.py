"""Constants for Blog model field names"""


class BlogFields:
    """Field name constants for Blog model"""
    ID = "id"
    TITLE = "title"
    AUTHOR = "author"
    URL = "url"
    LIKES = "likes"
    OWNER = "owner"

    # Fields a client may change after creation
    MUTABLE = (TITLE, AUTHOR, URL, LIKES)

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
