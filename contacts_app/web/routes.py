# contacts_app/web/routes.py
from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash
from .forms import parse_contact_form

bp = Blueprint('web', __name__)

SORT_OPTIONS = ('favorite', 'first', 'last')


def api():
    return current_app.extensions['contacts_api']


def load_sidebar(active_id=None):
    """Contacts list shown on every page, filtered by ?q= and ordered by ?sort=."""
    q = request.args.get('q')
    sort = request.args.get('sort')
    if sort not in SORT_OPTIONS:
        sort = None

    if q:
        contacts = api().search_contacts(q, sort=sort)
    else:
        contacts = api().list_contacts(sort=sort)
    return {
        'contacts': contacts,
        'q': q or '',
        'sort': sort,
        'sort_options': SORT_OPTIONS,
        'active_id': active_id
    }


@bp.route('/', methods=['GET', 'POST'])
def index():
    if request.method == 'POST':
        contact_id = api().create_contact({
            'first': 'No',
            'last': 'Name',
            'favorite': False,
            'notes': []
        })
        return redirect(url_for('web.edit_contact', contact_id=contact_id))

    return render_template('index.html', **load_sidebar())


@bp.route('/contacts/<contact_id>', methods=['GET', 'POST'])
def contact_detail(contact_id):
    if request.method == 'POST':
        if 'note' in request.form:
            note = request.form['note'].strip()
            if note:
                api().add_note(contact_id, note)
            else:
                flash('A note needs some text.', 'error')
        else:
            api().toggle_favorite(contact_id)
        return redirect(url_for('web.contact_detail', contact_id=contact_id))

    contact = api().get_contact(contact_id)
    return render_template('contact.html', contact=contact, **load_sidebar(contact_id))


@bp.route('/contacts/<contact_id>/edit', methods=['GET', 'POST'])
def edit_contact(contact_id):
    contact = api().get_contact(contact_id)

    if request.method == 'POST':
        values, errors = parse_contact_form(request.form)
        if errors:
            # Hand the submission back so nothing typed is lost
            return render_template(
                'edit.html', contact=contact, values=values, errors=errors,
                **load_sidebar(contact_id)
            ), 400
        api().update_contact(contact_id, values)
        return redirect(url_for('web.contact_detail', contact_id=contact_id))

    return render_template(
        'edit.html', contact=contact, values=contact, errors={},
        **load_sidebar(contact_id)
    )


@bp.route('/contacts/<contact_id>/destroy', methods=['POST'])
def destroy_contact(contact_id):
    api().delete_contact(contact_id)
    flash('Contact deleted.', 'success')
    return redirect(url_for('web.index'))


@bp.route('/contacts/<contact_id>/notes/<int:note_index>')
def view_note(contact_id, note_index):
    contact = api().get_contact(contact_id)
    note = api().get_note(contact_id, note_index)
    return render_template(
        'note.html', contact=contact, note=note, note_index=note_index,
        **load_sidebar(contact_id)
    )
