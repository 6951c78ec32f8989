# contacts_app/routes/contact_routes.py
from flask import Blueprint, current_app, request, jsonify
from ..exceptions import ValidationError

bp = Blueprint('contacts_api', __name__)


def contacts():
    return current_app.extensions['contact_service']


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data


@bp.route('/', methods=['GET'])
def index():
    return "Contacts REST API with Flask", 200, {'Content-Type': 'text/plain; charset=utf-8'}


@bp.route('/contacts', methods=['GET'])
def list_contacts():
    results = contacts().list_contacts(sort=request.args.get('sort'))
    return jsonify(results)


@bp.route('/contacts/search', methods=['GET'])
def search_contacts():
    results = contacts().search_contacts(
        request.args.get('q'),
        sort=request.args.get('sort')
    )
    return jsonify(results)


@bp.route('/contacts/<contact_id>', methods=['GET'])
def get_contact(contact_id):
    return jsonify(contacts().get_contact(contact_id))


@bp.route('/contacts', methods=['POST'])
def create_contact():
    contact_id = contacts().create_contact(_json_body())
    return jsonify({"message": "Created new contact", "_id": contact_id}), 201


@bp.route('/contacts/<contact_id>', methods=['PUT'])
def update_contact(contact_id):
    contact = contacts().update_contact(contact_id, _json_body())
    return jsonify({"message": f"Updated contact with id {contact_id}", "contact": contact})


@bp.route('/contacts/<contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    contacts().delete_contact(contact_id)
    return jsonify({"message": f"Deleted contact with id {contact_id}"})


@bp.route('/contacts/<contact_id>/favorite', methods=['PATCH'])
def toggle_favorite(contact_id):
    favorite = contacts().toggle_favorite(contact_id)
    return jsonify({
        "message": f"Toggled favorite property of contact with id {contact_id}",
        "favorite": favorite
    })


@bp.route('/contacts/<contact_id>/notes', methods=['POST'])
def add_note(contact_id):
    index = contacts().add_note(contact_id, _json_body().get('note'))
    return jsonify({"message": f"Added note to contact with id {contact_id}", "index": index}), 201


@bp.route('/contacts/<contact_id>/notes/<note_index>', methods=['GET'])
def get_note(contact_id, note_index):
    note = contacts().get_note(contact_id, note_index)
    return jsonify({"index": int(note_index), "note": note})
