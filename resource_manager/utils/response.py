from flask import jsonify


def respond(status_code, message, data=None):
    """Wrap a result in the ``{status, message, data}`` envelope"""
    return jsonify({
        'status': 'success' if status_code < 400 else 'error',
        'message': message,
        'data': data,
    }), status_code
