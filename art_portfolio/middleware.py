# art_portfolio/middleware.py
from urllib.parse import parse_qs

from flask import Request
from werkzeug.utils import cached_property

from .utils import sanitize_keys

OVERRIDABLE_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])


class MethodOverrideMiddleware:
    """
    Lets HTML forms reach PUT/PATCH/DELETE routes: a POST carrying
    ``?_method=DELETE`` is dispatched as a DELETE.
    """

    def __init__(self, wsgi_app, param='_method'):
        self.wsgi_app = wsgi_app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            values = parse_qs(environ.get('QUERY_STRING', '')).get(self.param)
            if values:
                method = values[0].upper()
                if method in OVERRIDABLE_METHODS:
                    environ['methodoverride.original_method'] = 'POST'
                    environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)


class SanitizedRequest(Request):
    """Request whose query and form keys never contain '$' or '.'."""

    @cached_property
    def args(self):
        return sanitize_keys(Request.args.fget(self))

    def _load_form_data(self):
        super()._load_form_data()
        self.__dict__['form'] = sanitize_keys(self.__dict__['form'])
