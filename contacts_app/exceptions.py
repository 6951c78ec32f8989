# contacts_app/exceptions.py
"""
Application errors raised by the contact service and turned into JSON
responses by the handlers registered in ``create_app``.

    ContactsError                 500
    ├── ValidationError           400
    ├── InvalidObjectIdError      400
    ├── ContactNotFoundError      404
    ├── NoteNotFoundError         404
    └── WriteNotAcknowledgedError 500
"""


class ContactsError(Exception):
    status_code = 500
    message = 'An unexpected error occurred'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'message': self.message}


class ValidationError(ContactsError):
    status_code = 400
    message = 'Invalid request'


class InvalidObjectIdError(ContactsError):
    status_code = 400
    message = 'Invalid ObjectId'


class ContactNotFoundError(ContactsError):
    status_code = 404
    message = 'Contact not found'


class NoteNotFoundError(ContactsError):
    status_code = 404
    message = 'Note not found'


class WriteNotAcknowledgedError(ContactsError):
    """The database did not acknowledge a write."""

    def __init__(self, operation):
        super().__init__(f"Failed to {operation}")
