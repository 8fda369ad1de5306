"""
Table endpoints: search, sort and paginate a screen's records
"""
from flask import Blueprint, current_app, jsonify, request

from panel.services.collection_view import view
from panel.utils.request_params import view_params_from_args

bp = Blueprint("tables", __name__, url_prefix="/tables")

# Which fields each screen searches and sorts on
SCREENS = {
    'users': {
        'search': ['username', 'email', 'hwid', 'ip'],
        'sortable': ['username', 'hwid', 'ip', 'createdAt', 'lastLogin'],
        'default_sort': 'createdAt',
        'default_direction': 'desc',
    },
    'licenses': {'search': []},
    'files': {'search': ['id', 'filename', 'url']},
    'webhooks': {'search': ['id', 'endpoint', 'name', 'userAgent']},
    'subscriptions': {'search': ['name']},
    'channels': {'search': ['name']},
    'messages': {'search': ['author', 'message', 'channel']},
    'sessions': {'search': ['id', 'credentials', 'ipAddress']},
    'blacklists': {'search': ['id', 'data', 'type', 'reason']},
    'tokens': {'search': ['token', 'assigned']},
    'vars': {'search': ['id', 'name', 'data']},
}


@bp.route('/<screen>', methods=['POST'])
def table_view(screen):
    """Render one page of a screen's records (sent as {"records": [...]})"""
    table = SCREENS.get(screen)
    if table is None:
        return jsonify({'success': False, 'error': 'Unknown table'}), 404

    data = request.get_json(silent=True) or {}
    records = data.get('records')
    if not isinstance(records, list):
        return jsonify({'success': False, 'error': 'records must be a list'}), 400

    params = view_params_from_args(
        request.args,
        table['search'],
        sortable_fields=table.get('sortable', ()),
        default_sort=table.get('default_sort'),
        default_direction=table.get('default_direction', 'asc'),
    )
    result = view(records, params)
    current_app.logger.debug(
        f"Table {screen}: {result.total_filtered} of {len(records)} records, "
        f"page {result.page}/{result.total_pages}")

    return jsonify({
        'success': True,
        'items': result.items,
        'total_filtered': result.total_filtered,
        'total_pages': result.total_pages,
        'page': result.page,
        'page_size': result.page_size,
        'page_numbers': result.page_numbers(current_app.config['PAGINATION_WINDOW']),
        'first_index': result.first_index,
        'last_index': result.last_index,
    })
