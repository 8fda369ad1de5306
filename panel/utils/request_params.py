from flask import current_app

from panel.services.collection_view import ViewParams


def _int_or_none(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def view_params_from_args(args, search_fields, sortable_fields=None, default_sort=None,
                          default_direction='asc'):
    """Build table view parameters from a request's query string.

    Recognised arguments: ``q`` (search text), ``sort``, ``dir`` (asc/desc),
    ``page`` and ``per_page``. Values outside what the table offers fall
    back to defaults instead of failing the request:

    - ``per_page`` must be one of ``PAGE_SIZE_CHOICES``
    - ``sort`` must be one of ``sortable_fields`` (when given)

    Must be called inside an app context.
    """
    page_size = _int_or_none(args.get('per_page'))
    if page_size not in current_app.config['PAGE_SIZE_CHOICES']:
        page_size = current_app.config['DEFAULT_PAGE_SIZE']

    sort_field = args.get('sort') or default_sort
    if sortable_fields is not None and sort_field not in sortable_fields:
        sort_field = default_sort

    return ViewParams(
        query=(args.get('q') or '').strip(),
        search_fields=list(search_fields),
        sort_field=sort_field,
        sort_direction=args.get('dir') or default_direction,
        page=args.get('page', 1),
        page_size=page_size,
    )
