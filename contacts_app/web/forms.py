# contacts_app/web/forms.py
from urllib.parse import urlparse

CONTACT_FORM_FIELDS = ('first', 'last', 'twitter', 'avatar')
REQUIRED_FIELDS = {
    'first': 'First name is required.',
    'last': 'Last name is required.',
}


def parse_contact_form(form):
    """
    Reads the edit form into ``(values, errors)``. ``values`` holds the
    stripped submission (empty optional fields become None) and ``errors``
    maps a field name to its message.
    """
    values = {}
    for field in CONTACT_FORM_FIELDS:
        value = (form.get(field) or '').strip()
        values[field] = value or None

    errors = {}
    for field, message in REQUIRED_FIELDS.items():
        if not values[field]:
            errors[field] = message

    avatar = values['avatar']
    if avatar:
        parsed = urlparse(avatar)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            errors['avatar'] = 'Avatar must be an http(s) URL.'

    return values, errors
