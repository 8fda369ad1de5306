"""
App-settings endpoints: save durations and limits, flip function toggles
"""
from flask import Blueprint, current_app, jsonify, request
from werkzeug.datastructures import MultiDict

from panel.forms import AppSettingsForm, form_errors
from panel.models import AppSettings
from panel.services.durations import humanize

bp = Blueprint("settings", __name__, url_prefix="/settings")


def _settings_response(settings):
    return jsonify({
        'success': True,
        'settings': settings.to_payload(),
        'toggles': settings.toggles(),
        'all_enabled': settings.all_functions_enabled,
        'cooldown': humanize(settings.cooldown_seconds),
        'session': humanize(settings.session_seconds),
    })


@bp.route('/app', methods=['POST'])
def update_app_settings():
    """Apply submitted form values to the current settings record"""
    data = request.get_json(silent=True) or {}
    settings = AppSettings.from_payload(data.get('settings'))

    form = AppSettingsForm(formdata=MultiDict(data.get('form') or {}))
    if not form.validate():
        return jsonify({'success': False, 'errors': form_errors(form)}), 400

    updated = form.apply_to(settings)
    current_app.logger.info(
        f"App settings updated: cooldown={updated.cooldown_seconds}s, "
        f"session={updated.session_seconds}s")
    return _settings_response(updated)


@bp.route('/app/functions', methods=['POST'])
def toggle_functions():
    """Toggle one function ({"key", "enabled"}) or all of them ({"all"})"""
    data = request.get_json(silent=True) or {}
    settings = AppSettings.from_payload(data.get('settings'))

    if 'all' in data:
        updated = settings.with_all_toggles(bool(data['all']))
    else:
        try:
            updated = settings.with_toggle(data.get('key'), bool(data.get('enabled')))
        except KeyError:
            return jsonify({'success': False, 'error': 'Invalid function key'}), 400

    current_app.logger.debug(
        f"functionValue {settings.function_value} -> {updated.function_value}")
    return _settings_response(updated)
