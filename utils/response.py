from flask import jsonify


def json_response(message="success", data=None, code=200, error=None):
    body = {"code": code, "message": message, "data": data}
    if error:
        body["error"] = error
    resp = jsonify(body)
    resp.status_code = code
    return resp
