from flask import jsonify


def api_response(message, code, status, data=None):
    """
    Builds the envelope every API handler answers with and pairs it with the
    HTTP status, e.g. ``return api_response("Campaign detail", 200, "success", data)``.
    """
    body = {
        "meta": {
            "message": message,
            "code": code,
            "status": status,
        },
        "data": data,
    }
    return jsonify(body), code


def format_form_errors(form):
    """Flattens WTForms field errors into ``["field: message", ...]``."""
    errors = []
    for field_name, messages in form.errors.items():
        for message in messages:
            errors.append(f"{field_name}: {message}")
    return errors
