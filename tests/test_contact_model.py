from datetime import datetime, timezone

from bson import ObjectId

from contacts_app.models.contact import Contact, normalize_notes, serialize_contact


class TestNormalizeNotes:
    def test_none_becomes_empty_list(self):
        assert normalize_notes(None) == []

    def test_legacy_string_becomes_single_entry(self):
        assert normalize_notes("Met at the meetup") == ["Met at the meetup"]

    def test_blank_string_becomes_empty_list(self):
        assert normalize_notes("   ") == []

    def test_list_keeps_order(self):
        assert normalize_notes(["one", "two"]) == ["one", "two"]


class TestContact:
    def test_from_dict_ignores_unknown_keys(self):
        contact = Contact.from_dict({'first': 'Ada', 'last': 'Lovelace', 'role': 'admin'})

        assert 'role' not in contact.to_dict()
        assert contact.first == 'Ada'
        assert contact.favorite is False
        assert contact.notes == []
        assert isinstance(contact._id, ObjectId)
        assert isinstance(contact.created_at, datetime)

    def test_to_json_stringifies_id_and_timestamp(self):
        object_id = ObjectId()
        created_at = datetime(2024, 1, 15, 12, 0, 0)
        document = {'_id': object_id, 'first': 'Grace', 'created_at': created_at, 'notes': 'legacy'}

        data = serialize_contact(document)

        assert data['_id'] == str(object_id)
        assert data['created_at'] == '2024-01-15T12:00:00+00:00'
        assert data['notes'] == ['legacy']

    def test_aware_timestamp_keeps_its_offset(self):
        created_at = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

        data = Contact(first='Grace', created_at=created_at).to_json()

        assert data['created_at'] == '2024-01-15T12:00:00+00:00'
