# contacts_app/services/contact_service.py
import logging
import re
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from ..models.contact import Contact, MUTABLE_FIELDS, normalize_notes, serialize_contact
from ..exceptions import (
    ContactNotFoundError,
    InvalidObjectIdError,
    NoteNotFoundError,
    ValidationError,
    WriteNotAcknowledgedError,
)

logger = logging.getLogger(__name__)

SORT_ORDERS = {
    'first': [('first', ASCENDING), ('last', ASCENDING)],
    'last': [('last', ASCENDING), ('first', ASCENDING)],
    'favorite': [('favorite', DESCENDING), ('first', ASCENDING), ('last', ASCENDING)],
}
DEFAULT_SORT = 'first'

TEXT_FIELDS = ('first', 'last', 'avatar', 'twitter')


def parse_object_id(value):
    """Returns an ObjectId for ``value`` or raises InvalidObjectIdError."""
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would mint a fresh id instead of failing
    if not value:
        raise InvalidObjectIdError()
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidObjectIdError() from e


def sort_spec(sort):
    return SORT_ORDERS.get(sort or DEFAULT_SORT, SORT_ORDERS[DEFAULT_SORT])


class ContactService:
    def __init__(self, db):
        self.db = db
        self.contacts_collection = db['contacts']

    def _extract_fields(self, data):
        """
        Keeps only the client-writable fields of a request body and checks
        their types. Raises ValidationError on anything unusable.
        """
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object.")

        fields = {key: data[key] for key in MUTABLE_FIELDS if key in data}
        for key in TEXT_FIELDS:
            value = fields.get(key)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"Field '{key}' must be a string.")
        if 'favorite' in fields and not isinstance(fields['favorite'], bool):
            raise ValidationError("Field 'favorite' must be a boolean.")
        if 'notes' in fields:
            notes = fields['notes']
            if notes is not None and not isinstance(notes, (str, list)):
                raise ValidationError("Field 'notes' must be a list of strings.")
            if isinstance(notes, list) and not all(isinstance(note, str) for note in notes):
                raise ValidationError("Field 'notes' must be a list of strings.")
            fields['notes'] = normalize_notes(notes)
        return fields

    def _find(self, contact_id):
        contact = self.contacts_collection.find_one({"_id": parse_object_id(contact_id)})
        if not contact:
            logger.debug(f"Contact {contact_id} not found")
            raise ContactNotFoundError()
        return contact

    def list_contacts(self, sort=None):
        contacts = self.contacts_collection.find().sort(sort_spec(sort))
        return [serialize_contact(contact) for contact in contacts]

    def search_contacts(self, q, sort=None):
        """Case-insensitive substring match on first or last name."""
        if q is None:
            raise ValidationError("Missing search query parameter 'q'.")
        pattern = re.escape(q.lower())
        query = {
            "$or": [
                {"first": {"$regex": pattern, "$options": "i"}},
                {"last": {"$regex": pattern, "$options": "i"}},
            ]
        }
        contacts = self.contacts_collection.find(query).sort(sort_spec(sort))
        return [serialize_contact(contact) for contact in contacts]

    def get_contact(self, contact_id):
        return serialize_contact(self._find(contact_id))

    def create_contact(self, contact_data):
        contact = Contact.from_dict(self._extract_fields(contact_data))
        result = self.contacts_collection.insert_one(contact.to_dict())
        if not result.acknowledged:
            raise WriteNotAcknowledgedError("create new contact")
        logger.info(f"Created contact {result.inserted_id}")
        return str(result.inserted_id)

    def update_contact(self, contact_id, contact_data):
        object_id = parse_object_id(contact_id)
        fields = self._extract_fields(contact_data)
        if not fields:
            raise ValidationError("No updatable fields provided.")

        result = self.contacts_collection.update_one({"_id": object_id}, {"$set": fields})
        if not result.acknowledged:
            raise WriteNotAcknowledgedError("update contact")
        if result.matched_count == 0:
            raise ContactNotFoundError()
        logger.info(f"Updated contact {contact_id}: {sorted(fields)}")
        return self.get_contact(object_id)

    def delete_contact(self, contact_id):
        result = self.contacts_collection.delete_one({"_id": parse_object_id(contact_id)})
        if not result.acknowledged:
            raise WriteNotAcknowledgedError("delete contact")
        if result.deleted_count == 0:
            raise ContactNotFoundError()
        logger.info(f"Deleted contact {contact_id}")
        return True

    def toggle_favorite(self, contact_id):
        """Flips the favorite flag and returns its new value."""
        contact = self._find(contact_id)
        new_favorite = not contact.get('favorite', False)
        result = self.contacts_collection.update_one(
            {"_id": contact['_id']},
            {"$set": {"favorite": new_favorite}}
        )
        if not result.acknowledged:
            raise WriteNotAcknowledgedError("toggle favorite")
        return new_favorite

    def add_note(self, contact_id, note):
        """Appends a note and returns its position in the notes list."""
        object_id = parse_object_id(contact_id)
        if not isinstance(note, str) or not note.strip():
            raise ValidationError("Note text is required.")

        stored = self._find(object_id).get('notes')
        if stored is None or isinstance(stored, list):
            contact = self.contacts_collection.find_one_and_update(
                {"_id": object_id},
                {"$push": {"notes": note}},
                return_document=ReturnDocument.AFTER
            )
            if not contact:
                raise ContactNotFoundError()
            index = len(contact['notes']) - 1
        else:
            # $push fails on a legacy string value, so rewrite the whole list
            notes = normalize_notes(stored) + [note]
            result = self.contacts_collection.update_one({"_id": object_id}, {"$set": {"notes": notes}})
            if not result.acknowledged:
                raise WriteNotAcknowledgedError("add note to contact")
            index = len(notes) - 1

        logger.info(f"Added note {index} to contact {contact_id}")
        return index

    def get_note(self, contact_id, note_index):
        object_id = parse_object_id(contact_id)
        try:
            index = int(note_index)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid note index '{note_index}'.") from e

        notes = normalize_notes(self._find(object_id).get('notes'))
        if index < 0 or index >= len(notes):
            raise NoteNotFoundError()
        return notes[index]
