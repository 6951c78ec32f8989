# contacts_app/models/contact.py
from datetime import datetime, timezone
from bson import ObjectId

# Fields a client may write; _id and created_at are owned by the server.
MUTABLE_FIELDS = ('first', 'last', 'avatar', 'twitter', 'notes', 'favorite')


def normalize_notes(notes):
    """
    Older documents stored notes as one free-text string. Everything is
    handled as an ordered list of strings now.
    """
    if notes is None:
        return []
    if isinstance(notes, str):
        return [notes] if notes.strip() else []
    return [str(note) for note in notes]


class Contact:
    def __init__(self, first=None, last=None, avatar=None, twitter=None,
                 notes=None, favorite=False, created_at=None, _id=None):
        self._id = _id or ObjectId()
        self.first = first
        self.last = last
        self.avatar = avatar
        self.twitter = twitter
        self.notes = normalize_notes(notes)
        self.favorite = bool(favorite)
        self.created_at = created_at or datetime.now(timezone.utc)

    @property
    def id(self):
        return str(self._id)

    @classmethod
    def from_dict(cls, data):
        return cls(
            _id=data.get('_id'),
            first=data.get('first'),
            last=data.get('last'),
            avatar=data.get('avatar'),
            twitter=data.get('twitter'),
            notes=data.get('notes'),
            favorite=data.get('favorite', False),
            created_at=data.get('created_at')
        )

    def to_dict(self):
        return {
            "_id": self._id,
            "first": self.first,
            "last": self.last,
            "avatar": self.avatar,
            "twitter": self.twitter,
            "notes": self.notes,
            "favorite": self.favorite,
            "created_at": self.created_at
        }

    def to_json(self):
        data = self.to_dict()
        data['_id'] = self.id
        if isinstance(self.created_at, datetime):
            created_at = self.created_at
            # pymongo hands back naive datetimes that are UTC
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
            data['created_at'] = created_at.isoformat()
        return data


def serialize_contact(document):
    """Turns a raw contacts document into a JSON-safe dict."""
    return Contact.from_dict(document).to_json()
