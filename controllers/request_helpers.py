from flask import current_app, jsonify, request

from services.query_builder import DEFAULT_LIMIT, ListQuery, Page, parse_bool


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def default_page_size() -> int:
    return current_app.config.get("DEFAULT_PAGE_SIZE", DEFAULT_LIMIT)


def list_query_from_request() -> ListQuery:
    return ListQuery.from_args(request.args, default_limit=default_page_size())


def flag_arg(name: str) -> bool:
    """Boolean query-string flag; anything unparseable reads as false."""
    return request.args.get(name, default=False, type=parse_bool)


def include_deleted_arg() -> bool:
    return flag_arg("includeDeleted")


def page_response(page: Page, items_key: str, **extra):
    """List envelope as the whole body: {total, page, totalPages, <items_key>}."""
    data = page.to_envelope(items_key)
    data.update(extra)
    return jsonify(data), 200
