"""
License endpoints: validate the create and add-time dialogs
"""
from flask import Blueprint, jsonify, request
from werkzeug.datastructures import MultiDict

from panel.forms import AddTimeForm, LicenseCreateForm, form_errors
from panel.services.durations import humanize, to_seconds

bp = Blueprint("licenses", __name__, url_prefix="/licenses")


def _form_data():
    return MultiDict(request.get_json(silent=True) or {})


@bp.route('/create', methods=['POST'])
def create_licenses():
    """Check a create request and return what would be generated"""
    form = LicenseCreateForm(formdata=_form_data())
    if not form.validate():
        return jsonify({'success': False, 'errors': form_errors(form)}), 400

    spec = form.duration_spec()
    return jsonify({
        'success': True,
        'amount': form.amount.data,
        'mask': form.mask.data,
        'level': form.level.data,
        'note': form.note.data or '',
        'lowercase': form.lowercase_letters.data,
        'uppercase': form.uppercase_letters.data,
        'expiry': to_seconds(spec),
        'expiry_display': humanize(to_seconds(spec)),
    })


@bp.route('/add-time', methods=['POST'])
def add_time():
    """Convert the add-time dialog into seconds"""
    form = AddTimeForm(formdata=_form_data())
    if not form.validate():
        return jsonify({'success': False, 'errors': form_errors(form)}), 400

    seconds = to_seconds(form.duration_spec())
    return jsonify({'success': True, 'seconds': seconds, 'display': humanize(seconds)})
